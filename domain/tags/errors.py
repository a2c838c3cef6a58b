"""Errors raised by tag list operations."""


class InvalidOptionKey(ValueError):
    """Raised when add/remove receive an option other than ``parse``."""

    def __init__(self, keys: list[str], valid: tuple[str, ...] = ("parse",)) -> None:
        self.keys = list(keys)
        self.valid = tuple(valid)
        super().__init__(
            f"Unknown option key(s): {', '.join(self.keys)}. Valid keys are: {', '.join(self.valid)}"
        )

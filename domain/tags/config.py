"""Tag list configuration and the process-wide shared instance."""

import re
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.tags.normalizer import parameterize

DEFAULT_DELIMITER = ","


class TagConfig(BaseModel):
    """
    Delimiter, glue and normalization switches read by every parse/serialize call.

    ``glue`` left as None is derived from the first delimiter: the delimiter itself if it
    already ends with a space, otherwise the delimiter followed by one space.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    delimiter: str | list[str] = Field(
        default=DEFAULT_DELIMITER,
        description="Delimiter string, or alternative delimiter strings tried in order.",
    )
    glue: str | None = Field(
        default=None,
        description="String used to join tags when serializing (derived from delimiter when None).",
    )
    force_lowercase: bool = False
    force_parameterize: bool = False
    delimiter_is_pattern: bool = Field(
        default=False,
        description="Treat delimiters as raw regular expressions instead of literal strings.",
    )
    parameterizer: Callable[[str], str] = Field(default=parameterize, exclude=True)

    @field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, v: str | list[str]) -> str | list[str]:
        if isinstance(v, list):
            if not v:
                raise ValueError("delimiter list must not be empty")
            if any(not d for d in v):
                raise ValueError("delimiter entries must be non-empty strings")
        elif not v:
            raise ValueError("delimiter must be a non-empty string")
        return v

    @field_validator("glue")
    @classmethod
    def _check_glue(cls, v: str | None) -> str | None:
        if v is not None and not v:
            raise ValueError("glue must be a non-empty string")
        return v

    @property
    def delimiters(self) -> list[str]:
        if isinstance(self.delimiter, list):
            return list(self.delimiter)
        return [self.delimiter]

    @property
    def delimiter_pattern(self) -> str:
        """Alternation of all delimiters, escaped unless ``delimiter_is_pattern`` is set."""
        parts = self.delimiters if self.delimiter_is_pattern else [re.escape(d) for d in self.delimiters]
        return "|".join(parts)

    @property
    def effective_glue(self) -> str:
        if self.glue is not None:
            return self.glue
        first = self.delimiters[0]
        return first if first.endswith(" ") else f"{first} "


_shared = TagConfig()


def get_config() -> TagConfig:
    """Return the shared configuration used when a TagList has none of its own."""
    return _shared


def configure(**changes: object) -> TagConfig:
    """
    Update fields of the shared configuration in place.

    All changes are validated together first, so a bad value (pydantic.ValidationError)
    leaves the shared configuration untouched.
    """
    current = {key: getattr(_shared, key) for key in TagConfig.model_fields}
    validated = TagConfig(**{**current, **changes})
    for key in changes:
        setattr(_shared, key, getattr(validated, key))
    return _shared


def reset_config() -> TagConfig:
    """Restore the shared configuration to its defaults."""
    defaults = TagConfig()
    for key in TagConfig.model_fields:
        setattr(_shared, key, getattr(defaults, key))
    return _shared

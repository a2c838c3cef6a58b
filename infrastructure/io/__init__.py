"""I/O utilities: filesystem operations and line-oriented input."""

from infrastructure.io.fs import ensure_exists, iter_lines

__all__ = [
    "ensure_exists",
    "iter_lines",
]

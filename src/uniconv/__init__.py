"""uniconv – natural-language unit converter."""

from ._version import __version__

__all__ = [
    "__version__",
    "cli",
    "config",
    "conversion",
    "utils",
]

"""Package version."""

from importlib import metadata

try:
    __version__ = metadata.version("regex-match-values")
except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.0.0"

__all__ = ["__version__"]

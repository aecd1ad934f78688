"""termflags - Dump terminal attributes flag by flag."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("termflags")
except PackageNotFoundError:
    __version__ = "(local)"

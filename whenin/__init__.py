# whenin/__init__.py
from importlib.metadata import version as _dist_version, PackageNotFoundError

__all__ = []

try:
    __version__ = _dist_version("wheninmytime")
except PackageNotFoundError:
    # metadata is unavailable when running from a plain checkout
    __version__ = "0.0.0"

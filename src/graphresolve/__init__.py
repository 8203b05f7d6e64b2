from __future__ import annotations

from importlib import metadata

VERSION = "0.2.0"

try:
    __version__ = metadata.version("graphresolve")
except metadata.PackageNotFoundError:
    __version__ = f"{VERSION}+local"

"""Star Citizen Game.log combat event parser."""

from sclogparser.version import __version__

__all__ = ["__version__"]

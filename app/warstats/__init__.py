"""warstats: ranked war attack reports for Torn factions."""
from .version import __version__

__all__ = ["__version__"]

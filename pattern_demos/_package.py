"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-demos"
__version__ = "1.0.0"  # Version for imports
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Narrated console demos of classic object-oriented design patterns"

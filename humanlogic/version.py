"""Human Logic version information"""

__version__ = "0.3.0"


def get_version() -> str:
    """Return the package version string"""
    return __version__

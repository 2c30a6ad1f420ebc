"""www-launcher - start the bundled web application from anywhere."""

from .version import __version__

__all__ = ["__version__"]

"""Version information for www-launcher."""

__version__ = "0.1.0"

"""autoproxy: proxy auto-configuration for WSL2 Ubuntu guests."""

__version__ = "0.1.0"

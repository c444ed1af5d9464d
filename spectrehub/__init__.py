"""SpectreHub: unified view over Spectre audit tool reports."""

__version__ = "0.1.0"

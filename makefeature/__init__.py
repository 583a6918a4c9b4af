"""makefeature -- feature-slice scaffolding for Laravel applications."""

__version__ = "0.1.0"

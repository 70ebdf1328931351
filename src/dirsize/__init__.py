"""dirsize: per-folder disk usage analyser."""

__version__ = "1.0.0"

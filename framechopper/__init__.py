"""Re-tile, subsample and reflow sprite sheets."""

__version__ = "1.0"

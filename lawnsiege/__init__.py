"""A headless lane-defence game model of plants, zombies, cards and scenes."""

__version__ = "0.1.0"
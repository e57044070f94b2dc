"""pairrank - rank items by pairwise choices and merge several people's rankings."""

__version__ = "0.1.0"

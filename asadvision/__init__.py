"""Engine-free game rules for a side-scrolling boss-fight arena."""

__version__ = "0.1.0"
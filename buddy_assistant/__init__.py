"""Voice/text assistant core over a Baby Buddy activity store."""

__version__ = "0.1.0"

"""Coin refill form for parking machines."""
__version__ = "1.0.0"

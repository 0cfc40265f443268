"""Watch web addresses and send an SMS when they come online."""

__version__ = "0.1.0"
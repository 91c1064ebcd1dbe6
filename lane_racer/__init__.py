"""Lane Racer: a three-lane arcade driving game built on pygame."""

__version__ = "0.1.0"

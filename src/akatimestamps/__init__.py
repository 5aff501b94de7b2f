"""AKA Timestamps - question timestamps for the Ask Kati Anything podcast."""

__version__ = "0.1.0"

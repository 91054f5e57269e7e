"""Theme Studio: wallet widget theme builder and live preview."""

__version__ = "0.1.0"

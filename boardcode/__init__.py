"""Board-to-code helpers: peripheral derivation and generated document views."""

__version__ = "0.1.0"

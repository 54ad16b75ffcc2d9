"""stubargs — stub argument generator for call expressions."""

__version__ = "0.3.0"

"""Random restaurant picker for Restaurant Week."""

__version__ = "1.0.0"

"""Load, stress and accessibility testing for the leak reporting app."""

__version__ = "0.1.0"

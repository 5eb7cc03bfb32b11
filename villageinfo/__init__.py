"""Village Info API — village facility lookup and development suggestions."""

__version__ = "0.1.0"

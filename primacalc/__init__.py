"""Prima Calc - Colombian semi-annual service bonus (prima) calculator."""

__version__ = "0.1.0"

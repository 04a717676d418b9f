"""eles: a colorized directory lister in the spirit of ls."""

__version__ = "0.3.0"

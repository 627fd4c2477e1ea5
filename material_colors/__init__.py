"""Material colour palette lookup and copy-format rendering."""

__version__ = '1.0.0'

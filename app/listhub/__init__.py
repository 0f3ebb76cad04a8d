"""listhub - Curate categorized catalogs from pluggable list sources."""

__version__ = "0.3.0"

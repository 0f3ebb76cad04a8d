"""Core list processing engine: the list aggregate, taxonomy and caching."""

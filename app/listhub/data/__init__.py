"""Bundled data files for listhub."""

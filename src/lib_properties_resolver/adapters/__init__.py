"""Concrete adapters for overrides, file search, resources and file parsing."""

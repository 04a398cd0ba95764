"""Override source adapters."""

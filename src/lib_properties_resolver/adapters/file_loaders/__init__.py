"""Properties file parsing adapters."""

"""Properties file search adapters."""

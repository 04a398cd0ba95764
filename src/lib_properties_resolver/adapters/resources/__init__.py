"""Resource search path adapters."""

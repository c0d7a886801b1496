"""Web adapters."""

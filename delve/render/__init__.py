"""pygame presentation."""

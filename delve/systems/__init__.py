"""Per-step rules: field of view and movement."""

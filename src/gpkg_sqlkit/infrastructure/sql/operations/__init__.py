"""Statement-level SQL operations."""

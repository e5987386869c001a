"""HTTP glue — the three strings a matcher needs from a request."""

"""HTTP decision inspector."""

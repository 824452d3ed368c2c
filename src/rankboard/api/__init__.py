"""HTTP API for the Rankboard application."""

"""Operational scripts for Rankboard."""

"""HTTP API for Payment Instructions."""

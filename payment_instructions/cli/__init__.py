"""Command-line interface for Payment Instructions."""

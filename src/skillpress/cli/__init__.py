"""Command-line interface for Skillpress."""

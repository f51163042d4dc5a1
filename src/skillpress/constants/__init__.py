"""Constant values shared across Skillpress modules."""

"""Utility modules for sqlcompose."""

"""Shared helpers: typed errors, logging setup and date formatting."""

"""Shared helpers for security and timestamps."""

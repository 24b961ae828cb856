"""Utility helpers for logging, settings and file access."""

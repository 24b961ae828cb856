"""Data models exchanged with the user-facing interfaces."""

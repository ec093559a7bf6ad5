"""Persistence collaborators owned by the assistant callers."""

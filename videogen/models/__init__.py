"""Data models for project documents and engine outputs."""

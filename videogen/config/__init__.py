"""Configuration: default documents, constants and settings loading."""

"""Shared utilities: logging and NLP model loading."""

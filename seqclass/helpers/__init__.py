"""Helper utilities shared across the classifier package."""

"""Shared builders and fakes for the classifier test suite."""

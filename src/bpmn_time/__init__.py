"""Parsing of ISO-8601 style repeating intervals for workflow timer definitions."""

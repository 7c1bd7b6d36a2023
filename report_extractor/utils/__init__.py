"""Shared helpers for the report extractor."""

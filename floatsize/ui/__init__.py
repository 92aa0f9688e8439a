"""Textual user interface for floatsize."""

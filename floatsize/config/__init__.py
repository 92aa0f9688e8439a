"""Configuration for floatsize."""

"""
floatsize - browse and resize floating terminal panes
"""

__version__ = "0.1.0"

"""Utility modules for graphsearch."""

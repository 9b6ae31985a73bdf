"""Utility modules for winzoom."""

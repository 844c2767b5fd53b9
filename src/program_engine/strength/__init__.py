"""Strength prescription helpers."""

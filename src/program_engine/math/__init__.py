"""Periodization and estimation math."""

"""Conditioning prescription, HYROX templates and race simulation."""

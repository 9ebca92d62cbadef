"""Wiktionary page access."""

# ABOUTME: Data extraction from external sources (frequency list, Wiktionary)
# ABOUTME: Pipeline Stage 1: Word lists, page markup, and definitions/origins pulled from it

"""
Extraction Layer: Get raw data from external sources

This layer handles:
- Listing the most frequent words of a ranked corpus
- Fetching rendered Wiktionary pages
- Removing noise from page markup
- Extracting definitions and origin fragments

Data Flow: External Sources → Cleaned documents → Definitions and origins → core/
"""

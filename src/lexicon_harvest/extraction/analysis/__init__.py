"""Markup analysis: noise removal, definition and origin extraction."""

from .definitions import extract_definitions
from .noise import clean, strip_boilerplate, strip_scripts
from .origin import extract_origin

__all__ = ["clean", "extract_definitions", "extract_origin", "strip_boilerplate", "strip_scripts"]

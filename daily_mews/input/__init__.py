"""
Input parsing utilities.

This package turns the raw feed document into domain values.
"""

from .feed_parser import FALLBACK_FEATURED, decode_xml_entities, extract_featured_item, parse_entries

__all__ = ["FALLBACK_FEATURED", "decode_xml_entities", "extract_featured_item", "parse_entries"]

"""Utility functions for Reelboard."""

from .hashtags import format_hashtags, parse_hashtags

__all__ = ["format_hashtags", "parse_hashtags"]

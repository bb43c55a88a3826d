"""Static strings and lookup tables."""

"""
kinometa - catalog metadata normalization for a Kinopoisk-style source.

This package turns partially populated upstream film, series, person and
image payloads into canonical records for a media catalog:
- models: Raw upstream payload models and canonical output records
- normalization: Year, date, rating, name, person, image and film normalizers
- config: Pydantic settings for provider identity
- core: Exception hierarchy
"""

__version__ = "0.1.0"

"""
django-newsroom - Editorial backend for a news site.

Features:
- Posts with scheduled publishing and date-based friendly ids
- Hierarchical sections (News > University > Academics)
- Inline media tags ({{Image:5}}) in post bodies
- YouTube embeds from pasted URLs
- Staff blogs organised in series
- JSON API for images
"""

__version__ = "0.1.0"

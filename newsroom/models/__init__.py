"""
Models for django-newsroom.

All models are importable from newsroom.models:

    from newsroom.models import Post, Author, Image, Blog, BlogSeries
"""
from .posts import Author, Post, PostQuerySet, is_visible
from .media import Image
from .blogs import Blog, BlogSeries

__all__ = [
    # Posts
    "Author",
    "Post",
    "PostQuerySet",
    "is_visible",
    # Media
    "Image",
    # Blogs
    "Blog",
    "BlogSeries",
]

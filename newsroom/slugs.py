"""
Friendly ids for posts.

A friendly id is the public path of a post: its publication date followed by
the significant words of its title, e.g. ``1999/11/10/ash-defeats-gary``.
"""
import datetime

from django.utils import timezone
from django.utils.text import slugify

from .conf import newsroom_settings


def significant_words(title, stop_words=None):
    """
    Return the slugified words of ``title`` without stop words.

    If every word is a stop word the words are returned as they are, so a
    title such as "The End" still yields something to identify the post by.
    """
    if stop_words is None:
        stop_words = newsroom_settings.SLUG_STOP_WORDS
    stop_words = set(stop_words)

    words = [word for word in slugify(title).split("-") if word]
    return [word for word in words if word not in stop_words] or words


def truncate_words(words, max_length):
    """Join ``words`` with dashes, keeping only whole words within max_length."""
    body = ""
    for word in words:
        candidate = f"{body}-{word}" if body else word
        if len(candidate) > max_length:
            break
        body = candidate

    # A single word longer than the limit is cut rather than dropped
    if not body and words:
        body = words[0][:max_length]
    return body


def format_date_path(value):
    """Return ``YYYY/MM/DD`` for a date or datetime."""
    if isinstance(value, datetime.datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        value = value.date()
    return value.strftime("%Y/%m/%d")


def normalize_friendly_id(title, published_date, max_length=None, stop_words=None):
    """
    Build the friendly id for a post.

    Args:
        title: post title, any casing and punctuation
        published_date: date (or datetime) the post is published on
        max_length: upper bound for the part after the date,
            defaults to the SLUG_MAX_LENGTH setting
        stop_words: words to drop, defaults to the SLUG_STOP_WORDS setting

    Returns:
        ``YYYY/MM/DD/<words>`` where ``<words>`` never ends with a dash.

    Raises:
        ValueError: the title has no usable characters or max_length < 1
    """
    if max_length is None:
        max_length = newsroom_settings.SLUG_MAX_LENGTH
    if max_length < 1:
        raise ValueError("max_length must be a positive integer")

    body = truncate_words(significant_words(title, stop_words), max_length)
    if not body:
        raise ValueError(f"Cannot build a friendly id from title {title!r}")

    return f"{format_date_path(published_date)}/{body}"

"""
Configuration settings for django-newsroom.

Override these in your Django settings.py:

    NEWSROOM = {
        'SLUG_MAX_LENGTH': 80,
        'TEASER_MAX_LENGTH': 250,
        'EMBED_URL_STRICT': False,
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Friendly ids
    "SLUG_MAX_LENGTH": 100,
    "SLUG_STOP_WORDS": [
        "a",
        "an",
        "and",
        "as",
        "at",
        "by",
        "for",
        "from",
        "in",
        "is",
        "of",
        "on",
        "or",
        "the",
        "to",
        "with",
    ],

    # Post validation
    "TEASER_MAX_LENGTH": 300,

    # Video embeds
    "EMBED_URL_STRICT": True,
    "EMBED_URL_TEMPLATE": "//www.youtube.com/watch?v={code}",
    "EMBED_PLAYER_TEMPLATE": "//www.youtube.com/embed/{code}",

    # Embedded media rendering
    "EMBEDDED_MEDIA_RESOLVER": "newsroom.embedded_media.EmbeddedMedia",

    # Images
    "IMAGE_UPLOAD_PATH": "newsroom/images/%Y/%m/",
    "THUMBNAIL_UPLOAD_PATH": "newsroom/thumbnails/%Y/%m/",
    "THUMBNAIL_SIZE": (300, 300),

    # Listings
    "POSTS_PER_PAGE": 10,
    "SERIES_PER_PAGE": 25,

    # API
    "API_REALM": "newsroom",
}


class NewsroomSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from newsroom.conf import newsroom_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid newsroom setting: {name}")

        user_settings = getattr(settings, "NEWSROOM", {})
        return user_settings.get(name, DEFAULTS[name])


newsroom_settings = NewsroomSettings()

"""
Video embed codes.

Posts store the provider's video id (the "embed code") rather than the URL
an editor pasted in. These helpers convert between the two.
"""
import re
from urllib.parse import parse_qs, urlsplit

from .conf import newsroom_settings
from .exceptions import ParseError

CODE_RE = re.compile(r"^[A-Za-z0-9_-]+$")

YOUTUBE_HOSTS = ("youtube.com", "youtube-nocookie.com")
SHORT_HOSTS = ("youtu.be",)


def embed_url(code):
    """Return the canonical protocol-relative URL for ``code``, or None if empty."""
    if not code:
        return None
    return newsroom_settings.EMBED_URL_TEMPLATE.format(code=code)


def player_url(code):
    """Return the iframe player URL for ``code``, or None if empty."""
    if not code:
        return None
    return newsroom_settings.EMBED_PLAYER_TEMPLATE.format(code=code)


def _normalize_host(netloc):
    host = netloc.lower().rsplit("@", 1)[-1].split(":", 1)[0]
    for prefix in ("www.", "m."):
        if host.startswith(prefix):
            host = host[len(prefix):]
    return host


def parse_embed_code(url):
    """
    Extract the video id from a YouTube URL.

    Accepts ``watch?v=``, ``youtu.be/``, ``embed/`` and ``v/`` URLs with any
    scheme, no scheme or a protocol-relative ``//`` prefix. An empty value
    returns an empty string.

    Raises:
        ParseError: the URL is not a recognized video URL
    """
    url = (url or "").strip()
    if not url:
        return ""

    if url.startswith("//"):
        url = "http:" + url
    elif "://" not in url:
        url = "http://" + url

    try:
        parts = urlsplit(url)
    except ValueError:
        raise ParseError(f"Malformed video URL: {url}")
    host = _normalize_host(parts.netloc)
    segments = [segment for segment in parts.path.split("/") if segment]

    code = None
    if host in SHORT_HOSTS and segments:
        code = segments[0]
    elif host in YOUTUBE_HOSTS:
        if segments == ["watch"]:
            code = parse_qs(parts.query).get("v", [None])[0]
        elif len(segments) >= 2 and segments[0] in ("embed", "v"):
            code = segments[1]

    if not code or not CODE_RE.match(code):
        raise ParseError(f"Unrecognized video URL: {url}")
    return code

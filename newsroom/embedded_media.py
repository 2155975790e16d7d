"""
Embedded media tags in post bodies.

Editors place media inline with bracket tags such as ``{{Image:5}}`` or
``{{Video:JuYeHPFR3f0}}``. Tags are stripped for plain display and replaced
with real markup when a body is rendered.
"""
import re
from collections import namedtuple

from django.utils.html import format_html

from .embeds import player_url
from .exceptions import ResolverError

TAG_RE = re.compile(r"\{\{(?P<kind>[A-Za-z]+):(?P<id>[^{}\s]+)\}\}")

EmbeddedTag = namedtuple("EmbeddedTag", ["kind", "id", "start", "end"])


def parse_tags(body):
    """Return the embedded tags found in ``body`` in document order."""
    return [
        EmbeddedTag(match.group("kind"), match.group("id"), match.start(), match.end())
        for match in TAG_RE.finditer(body or "")
    ]


def strip_tags(body):
    """Remove every embedded tag from ``body``, leaving the markup around it."""
    return TAG_RE.sub("", body or "")


class EmbeddedMedia:
    """
    Renders a post body with its embedded tags replaced.

    Usage:

        str(EmbeddedMedia(post.body))

    Tags of an unknown kind are left untouched. A tag pointing at a missing
    object raises ResolverError.
    """

    renderers = {
        "image": "render_image",
        "video": "render_video",
    }

    def __init__(self, body):
        self.body = body or ""

    def __str__(self):
        return self.render()

    def render(self):
        output = []
        position = 0
        for tag in parse_tags(self.body):
            output.append(self.body[position:tag.start])
            output.append(self.render_tag(tag))
            position = tag.end
        output.append(self.body[position:])
        return "".join(output)

    def render_tag(self, tag):
        name = self.renderers.get(tag.kind.lower())
        if name is None:
            return self.body[tag.start:tag.end]
        return str(getattr(self, name)(tag))

    def render_image(self, tag):
        from .models import Image

        try:
            image = Image.objects.get(pk=int(tag.id))
        except (ValueError, Image.DoesNotExist):
            raise ResolverError(f"Embedded image {tag.id} does not exist", tag=tag)

        if image.credit:
            caption = format_html("{} <span class=\"credit\">{}</span>", image.caption, image.credit)
        else:
            caption = image.caption
        return format_html(
            '<figure class="embedded-image"><img src="{}" alt="{}" />'
            "<figcaption>{}</figcaption></figure>",
            image.published_url or "",
            image.caption,
            caption,
        )

    def render_video(self, tag):
        return format_html(
            '<div class="embedded-video"><iframe src="{}" frameborder="0" '
            "allowfullscreen></iframe></div>",
            player_url(tag.id),
        )

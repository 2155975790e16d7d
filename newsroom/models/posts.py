"""
Post and Author models for django-newsroom.
"""
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.db.models.functions import Left
from django.urls import reverse
from django.utils import timezone
from django.utils.module_loading import import_string
from django.utils.text import slugify

from ..conf import newsroom_settings
from ..embedded_media import strip_tags
from ..embeds import embed_url, parse_embed_code, player_url
from ..exceptions import ParseError
from ..slugs import normalize_friendly_id
from ..taxonomy import SEPARATOR, Taxonomy, join_path, split_path
from ..validators import validate_teaser


def is_visible(published_at, now):
    """A post is visible once it has a publication time that is not in the future."""
    return published_at is not None and published_at <= now


class Author(models.Model):
    """
    Byline for posts and credit for photographs.
    """

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    affiliation = models.CharField(max_length=255, blank=True)
    tagline = models.CharField(max_length=255, blank=True)
    twitter = models.CharField(max_length=50, blank=True, help_text="Handle without the @")
    columnist = models.BooleanField(default=False)
    biography = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            base_slug = slugify(self.name)[:200] or "author"
            slug = base_slug
            counter = 2
            while Author.objects.filter(slug=slug).exclude(pk=self.pk).exists():
                slug = f"{base_slug}-{counter}"
                counter += 1
            self.slug = slug
        super().save(*args, **kwargs)


class PostQuerySet(models.QuerySet):
    def visible(self, now=None):
        """Posts published at or before ``now`` (the current time by default)."""
        if now is None:
            now = timezone.now()
        return self.filter(published_at__isnull=False, published_at__lte=now)

    def drafts(self):
        return self.filter(published_at__isnull=True)

    def scheduled(self, now=None):
        """Posts with a publication time still in the future."""
        if now is None:
            now = timezone.now()
        return self.filter(published_at__gt=now)

    def section(self, taxonomy):
        """
        Posts filed in the section of ``taxonomy`` or any of its subsections.

        Accepts a Taxonomy or a bare path such as ``["News", "University"]``.
        """
        if not isinstance(taxonomy, Taxonomy):
            taxonomy = Taxonomy("sections", taxonomy)
        if taxonomy.dimension != "sections":
            raise ValueError(f"Posts have no {taxonomy.dimension!r} taxonomy")
        if taxonomy.is_root:
            return self.all()

        # Prefix compared by equality so matching stays case-sensitive on SQLite
        path = taxonomy.stored_path
        return self.alias(
            section_prefix=Left("section_path", len(path) + len(SEPARATOR))
        ).filter(Q(section_path=path) | Q(section_prefix=path + SEPARATOR))


class PostManager(models.Manager.from_queryset(PostQuerySet)):
    """
    Manager limited to visible posts.

    The cut-off is taken when the queryset is built, so posts scheduled for
    the future show up on later queries without being saved again.
    """

    def get_queryset(self):
        return super().get_queryset().visible()


class Post(models.Model):
    """
    Article, column or blog post.

    ``published_at`` drives visibility: no value means a draft, a future
    value means scheduled. ``slug`` is the friendly id used in public URLs
    (``YYYY/MM/DD/words``) and is derived from the title and publication date.
    """

    title = models.CharField(max_length=255)
    subtitle = models.CharField(max_length=255, blank=True)
    teaser = models.TextField(
        blank=True,
        validators=[validate_teaser],
        help_text="One short paragraph shown in listings.",
    )
    body = models.TextField(help_text="Embed images with {{Image:<id>}}.")
    section_path = models.CharField(
        "section",
        max_length=255,
        blank=True,
        db_index=True,
        help_text="Section path from the root, e.g. News/University",
    )
    published_at = models.DateTimeField(
        null=True,
        blank=True,
        db_index=True,
        help_text="Leave empty for a draft; a future time schedules the post",
    )
    embed_code = models.CharField(max_length=64, blank=True, help_text="YouTube video id")

    authors = models.ManyToManyField(Author, related_name="posts")
    image = models.ForeignKey(
        "newsroom.Image",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="posts",
    )
    series = models.ForeignKey(
        "newsroom.BlogSeries",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="posts",
    )

    slug = models.CharField(max_length=255, blank=True, editable=False, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostManager()
    all_objects = PostQuerySet.as_manager()

    class Meta:
        ordering = ["-published_at", "-created_at"]
        default_manager_name = "all_objects"

    def __str__(self):
        return self.title

    def clean(self):
        if self.title:
            try:
                self.normalize_friendly_id(self.title)
            except ValueError:
                raise ValidationError(
                    {"title": "Title needs at least one letter or digit."},
                    code="invalid_title",
                )

    def save(self, *args, **kwargs):
        # Friendly ids follow the title and date until the post has gone live
        update_fields = kwargs.get("update_fields")
        if update_fields is None or "slug" in update_fields:
            if self.title and not (self.slug and self._was_live()):
                self.slug = self._unique_slug(self.normalize_friendly_id(self.title))
        super().save(*args, **kwargs)

    def _was_live(self):
        """Whether the stored row is already visible."""
        if self.pk is None:
            return False
        published_at = (
            Post.all_objects.filter(pk=self.pk)
            .values_list("published_at", flat=True)
            .first()
        )
        return is_visible(published_at, timezone.now())

    def _unique_slug(self, base_slug):
        slug = base_slug
        counter = 2
        while Post.all_objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base_slug}-{counter}"
            counter += 1
        return slug

    def get_absolute_url(self):
        return reverse("newsroom:post_detail", kwargs={"friendly_id": self.slug})

    @property
    def section(self):
        return split_path(self.section_path)

    @section.setter
    def section(self, value):
        self.section_path = join_path(value)

    def published_as_of(self, now):
        return is_visible(self.published_at, now)

    @property
    def is_published(self):
        return self.published_as_of(timezone.now())

    def normalize_friendly_id(self, title=None, max_length=None):
        """Friendly id for ``title`` on this post's publication date (today for drafts)."""
        if title is None:
            title = self.title
        published_date = self.published_at or timezone.now()
        return normalize_friendly_id(title, published_date, max_length)

    @property
    def body_text(self):
        """Body with all embedded media tags removed."""
        return strip_tags(self.body)

    def render_body(self, resolver=None):
        """
        Render the body with embedded media resolved.

        Args:
            resolver: class taking the raw body whose string form is the
                rendered body. Defaults to the EMBEDDED_MEDIA_RESOLVER setting.
        """
        if resolver is None:
            resolver = import_string(newsroom_settings.EMBEDDED_MEDIA_RESOLVER)
        return str(resolver(self.body))

    @property
    def embed_url(self):
        return embed_url(self.embed_code)

    @embed_url.setter
    def embed_url(self, url):
        try:
            self.embed_code = parse_embed_code(url)
        except ParseError:
            if newsroom_settings.EMBED_URL_STRICT:
                raise

    @property
    def embed_player_url(self):
        return player_url(self.embed_code)

    @property
    def byline(self):
        return ", ".join(author.name for author in self.authors.all())

    def publish(self, when=None):
        """Publish the post at ``when`` (now by default)."""
        self.published_at = when or timezone.now()
        self.save()

    def unpublish(self):
        """Turn the post back into a draft. Its friendly id is kept if it was live."""
        self.published_at = None
        self.save()

    def to_dict(self):
        """JSON representation used by the posts API."""
        return {
            "id": self.pk,
            "title": self.title,
            "subtitle": self.subtitle,
            "teaser": self.teaser,
            "body": self.body,
            "body_text": self.body_text,
            "section": self.section,
            "published_at": self.published_at.isoformat() if self.published_at else None,
            "slug": self.slug,
            "url": self.get_absolute_url() if self.slug else None,
            "embed_url": self.embed_url,
            "image_id": self.image_id,
            "author_ids": [author.pk for author in self.authors.all()],
            "series_id": self.series_id,
        }

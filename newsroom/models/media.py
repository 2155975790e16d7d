"""
Image model for django-newsroom.

Images are uploaded once and can be attached to posts as the lead image or
embedded in a body with ``{{Image:<id>}}``.
"""
import logging
import mimetypes
import os
from io import BytesIO

from django.core.files.base import ContentFile
from django.db import models
from django.utils import timezone

from ..conf import newsroom_settings

logger = logging.getLogger(__name__)


def get_upload_path(instance, filename):
    """Generate upload path for original images."""
    return timezone.now().strftime(newsroom_settings.IMAGE_UPLOAD_PATH) + filename


def get_thumbnail_path(instance, filename):
    """Generate upload path for generated thumbnails."""
    return timezone.now().strftime(newsroom_settings.THUMBNAIL_UPLOAD_PATH) + filename


def _isoformat(value):
    return value.isoformat() if value else None


class Image(models.Model):
    """
    Editorial photograph with caption and credit.

    Upload metadata (file name, content type, size) and dimensions are
    recorded when a new original is saved, and a thumbnail is generated.
    """

    original = models.FileField(upload_to=get_upload_path)
    thumbnail = models.FileField(upload_to=get_thumbnail_path, blank=True, editable=False)

    caption = models.TextField(blank=True)
    location = models.CharField(max_length=255, blank=True)
    credit = models.CharField(max_length=255, blank=True)
    date = models.DateField(help_text="Date the photograph was taken")
    photographer = models.ForeignKey(
        "newsroom.Author",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="images",
    )

    width = models.PositiveIntegerField(null=True, blank=True, editable=False)
    height = models.PositiveIntegerField(null=True, blank=True, editable=False)

    original_file_name = models.CharField(max_length=255, blank=True, editable=False)
    original_content_type = models.CharField(max_length=100, blank=True, editable=False)
    original_file_size = models.PositiveIntegerField(default=0, editable=False)
    original_updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.caption[:50] or self.original_file_name or f"Image #{self.pk}"

    def save(self, *args, **kwargs):
        new_upload = bool(self.original) and not self.original._committed
        if new_upload:
            name = os.path.basename(self.original.name)
            content_type = getattr(self.original.file, "content_type", None)
            self.original_file_name = name
            self.original_content_type = content_type or mimetypes.guess_type(name)[0] or ""
            self.original_file_size = self.original.size
            self.original_updated_at = timezone.now()

        super().save(*args, **kwargs)

        if new_upload:
            self._process_original()

    def _process_original(self):
        """Record dimensions and write a thumbnail for the saved original."""
        from PIL import Image as PILImage
        from PIL import UnidentifiedImageError

        try:
            with self.original.open("rb") as original:
                with PILImage.open(original) as img:
                    self.width, self.height = img.size
                    image_format = img.format or "PNG"
                    thumb = img.copy()
        except (UnidentifiedImageError, OSError) as exc:
            logger.warning("Cannot read image %s: %s", self.original.name, exc)
            return

        thumb.thumbnail(tuple(newsroom_settings.THUMBNAIL_SIZE))
        if image_format == "JPEG" and thumb.mode not in ("RGB", "L"):
            thumb = thumb.convert("RGB")

        buffer = BytesIO()
        thumb.save(buffer, format=image_format)
        self.thumbnail.save(
            f"thumb_{self.original_file_name}",
            ContentFile(buffer.getvalue()),
            save=False,
        )
        self.save(update_fields=["width", "height", "thumbnail"])

    @property
    def published_url(self):
        """Public URL of the original file."""
        if self.original:
            return self.original.url
        return None

    @property
    def thumbnail_url(self):
        if self.thumbnail:
            return self.thumbnail.url
        return self.published_url

    @property
    def orientation(self):
        """Return orientation based on dimensions."""
        if not self.width or not self.height:
            return "unknown"
        if self.width > self.height:
            return "landscape"
        elif self.height > self.width:
            return "portrait"
        return "square"

    def to_dict(self):
        """JSON representation used by the images API."""
        return {
            "id": self.pk,
            "caption": self.caption,
            "location": self.location,
            "credit": self.credit,
            "date": _isoformat(self.date),
            "photographer_id": self.photographer_id,
            "width": self.width,
            "height": self.height,
            "original_file_name": self.original_file_name,
            "original_content_type": self.original_content_type,
            "original_file_size": self.original_file_size,
            "original_updated_at": _isoformat(self.original_updated_at),
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
            "published_url": self.published_url,
            "thumbnail_url": self.thumbnail_url,
            "orientation": self.orientation,
        }

"""
Field validators for newsroom models.
"""
import re

from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible

from .conf import newsroom_settings

PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n|</p>\s*<p", re.IGNORECASE)


@deconstructible
class TeaserValidator:
    """
    A teaser is one short paragraph.

    The length bound defaults to the TEASER_MAX_LENGTH setting so it can be
    tuned per site without a schema change.
    """

    code = "teaser_too_long"

    def __init__(self, max_length=None):
        self.max_length = max_length

    def __call__(self, value):
        max_length = self.max_length or newsroom_settings.TEASER_MAX_LENGTH
        value = (value or "").strip()

        if len(value) > max_length:
            raise ValidationError(
                "Teaser must be at most %(max_length)d characters (it has %(length)d).",
                code=self.code,
                params={"max_length": max_length, "length": len(value)},
            )
        if PARAGRAPH_BREAK_RE.search(value):
            raise ValidationError(
                "Teaser must be a single paragraph.",
                code="teaser_paragraphs",
            )

    def __eq__(self, other):
        return isinstance(other, TeaserValidator) and self.max_length == other.max_length


validate_teaser = TeaserValidator()

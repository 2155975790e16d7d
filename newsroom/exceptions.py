"""
Exceptions raised by django-newsroom.

Field validation uses Django's ``ValidationError``; the classes below cover
the failures that are not tied to a single form field.
"""


class NewsroomError(Exception):
    """Base class for newsroom errors."""


class ParseError(NewsroomError, ValueError):
    """A user supplied value could not be parsed, e.g. an unknown video URL."""


class ResolverError(NewsroomError):
    """Embedded media in a post body could not be rendered."""

    def __init__(self, message, tag=None):
        super().__init__(message)
        self.tag = tag

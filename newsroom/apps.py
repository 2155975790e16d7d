"""Django app configuration for newsroom."""
from django.apps import AppConfig


class NewsroomConfig(AppConfig):
    """Configuration for the newsroom app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "newsroom"
    verbose_name = "Newsroom"

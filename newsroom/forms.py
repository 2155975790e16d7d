"""
Forms for django-newsroom.
"""
from django import forms
from django.core.exceptions import ValidationError
from django.forms.models import model_to_dict

from .embeds import embed_url, parse_embed_code
from .exceptions import ParseError
from .models import BlogSeries, Image, Post
from .taxonomy import join_path, split_path


class PostAdminForm(forms.ModelForm):
    """
    Post form for the admin.

    Editors paste a video URL; only the extracted embed code is stored.
    """

    embed_url = forms.CharField(
        label="Video URL",
        required=False,
        help_text="YouTube link, e.g. https://www.youtube.com/watch?v=JuYeHPFR3f0",
    )

    class Meta:
        model = Post
        fields = [
            "title",
            "subtitle",
            "teaser",
            "body",
            "section_path",
            "published_at",
            "authors",
            "image",
            "series",
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk:
            self.fields["embed_url"].initial = embed_url(self.instance.embed_code)

    def clean_embed_url(self):
        try:
            return parse_embed_code(self.cleaned_data["embed_url"])
        except ParseError as exc:
            raise ValidationError(str(exc), code="invalid_embed_url")

    def clean_section_path(self):
        try:
            return join_path(split_path(self.cleaned_data["section_path"]))
        except ValueError as exc:
            raise ValidationError(str(exc), code="invalid_section")

    def save(self, commit=True):
        if "embed_url" in self.cleaned_data:
            self.instance.embed_code = self.cleaned_data["embed_url"]
        return super().save(commit=commit)


class ImageForm(forms.ModelForm):
    """Image fields accepted by the API."""

    class Meta:
        model = Image
        fields = ["original", "caption", "location", "credit", "date", "photographer"]

    @classmethod
    def for_update(cls, instance, data):
        """
        Bind a form that only changes the fields present in ``data``.

        Missing fields keep the instance's current values.
        """
        merged = model_to_dict(instance, fields=[f for f in cls._meta.fields if f != "original"])
        merged.update(data.items())
        return cls(merged, instance=instance)


class BlogSeriesForm(forms.ModelForm):
    class Meta:
        model = BlogSeries
        fields = ["blog", "name", "description"]

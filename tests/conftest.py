"""
Shared fixtures for django-newsroom tests.
"""
import base64
import datetime
from io import BytesIO

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from PIL import Image as PILImage

from newsroom.models import Author, Blog, BlogSeries, Image, Post

User = get_user_model()

PASSWORD = "pikachu123"


def png_bytes(size=(64, 48), color="red"):
    buffer = BytesIO()
    PILImage.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username="ash",
        email="ash@example.com",
        password=PASSWORD,
    )


@pytest.fixture
def staff_user(db):
    """Create a staff user for the editorial screens."""
    return User.objects.create_user(
        username="oak",
        email="oak@example.com",
        password=PASSWORD,
        is_staff=True,
    )


@pytest.fixture
def auth_header(user):
    """Build an HTTP Basic Authorization header."""

    def _auth_header(username=None, password=PASSWORD):
        credentials = f"{username or user.username}:{password}".encode()
        return "Basic " + base64.b64encode(credentials).decode()

    return _auth_header


@pytest.fixture
def author(db):
    """Create a test author."""
    return Author.objects.create(
        name="Ash Ketchum",
        affiliation="PokeTrainer",
        tagline="Wanna be the very best",
        twitter="pokefan",
        biography="The best Pokemon trainer ever.",
    )


@pytest.fixture
def make_post(db, author):
    """Factory for posts; published an hour ago unless told otherwise."""

    def _make_post(**kwargs):
        kwargs.setdefault("title", "Pikachu wrecks everyone")
        kwargs.setdefault("subtitle", "Oak arrives just in time")
        kwargs.setdefault("teaser", "Ash becomes new Pokemon Champion.")
        kwargs.setdefault("body", "**Pikachu** wrecks everyone. The End.")
        kwargs.setdefault("section", ["News", "University"])
        if "published_at" not in kwargs:
            kwargs["published_at"] = timezone.now() - datetime.timedelta(hours=1)
        post = Post.objects.create(**kwargs)
        post.authors.add(author)
        return post

    return _make_post


@pytest.fixture
def png_upload():
    """Factory for uploaded PNG files."""

    def _png_upload(name="pidgey.png", size=(64, 48)):
        return SimpleUploadedFile(name, png_bytes(size), content_type="image/png")

    return _png_upload


@pytest.fixture
def image(db, author, png_upload):
    """Create an image with a real PNG original."""
    return Image.objects.create(
        original=png_upload(),
        caption="The rare Pidgey in its natural habitat",
        location="Viridian Forest",
        credit="Brock",
        date=datetime.date(2012, 5, 1),
        photographer=author,
    )


@pytest.fixture
def blog(db):
    return Blog.objects.create(name="Trainer Diaries")


@pytest.fixture
def series(db, blog):
    return BlogSeries.objects.create(blog=blog, name="Gym Battles")

"""
Blog and BlogSeries models for django-newsroom.
"""
from django.db import models
from django.urls import reverse
from django.utils.text import slugify


class Blog(models.Model):
    """A staff blog; its posts are grouped into series."""

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            base_slug = slugify(self.name)[:200] or "blog"
            slug = base_slug
            counter = 2
            while Blog.objects.filter(slug=slug).exclude(pk=self.pk).exists():
                slug = f"{base_slug}-{counter}"
                counter += 1
            self.slug = slug
        super().save(*args, **kwargs)


class BlogSeries(models.Model):
    """
    A recurring series within a blog.

    Readers browse a series through the blog's tagged listing, keyed by the
    series name.
    """

    blog = models.ForeignKey(Blog, on_delete=models.CASCADE, related_name="series")
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["blog__name", "name"]
        unique_together = ["blog", "name"]
        verbose_name = "Blog series"
        verbose_name_plural = "Blog series"

    def __str__(self):
        return f"{self.blog} > {self.name}"

    def get_absolute_url(self):
        return reverse(
            "newsroom:blog_tagged",
            kwargs={"blog_slug": self.blog.slug, "tag": self.name},
        )

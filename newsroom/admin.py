"""
Django admin configuration for newsroom.
"""
from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from .forms import PostAdminForm
from .models import Author, Blog, BlogSeries, Image, Post


@admin.register(Author)
class AuthorAdmin(admin.ModelAdmin):
    list_display = ["name", "affiliation", "twitter", "columnist"]
    list_filter = ["columnist"]
    search_fields = ["name", "affiliation", "biography"]
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Image)
class ImageAdmin(admin.ModelAdmin):
    list_display = [
        "thumbnail_preview",
        "caption_preview",
        "credit",
        "photographer",
        "date",
        "dimensions",
        "created_at",
    ]
    list_filter = ["date", "created_at"]
    search_fields = ["caption", "credit", "location", "original_file_name"]
    raw_id_fields = ["photographer"]
    readonly_fields = [
        "width",
        "height",
        "original_file_name",
        "original_content_type",
        "original_file_size",
        "original_updated_at",
        "created_at",
        "updated_at",
    ]

    fieldsets = (
        (None, {
            "fields": ("original", "caption", "credit", "photographer", "date", "location")
        }),
        ("Upload", {
            "fields": (
                "width",
                "height",
                "original_file_name",
                "original_content_type",
                "original_file_size",
                "original_updated_at",
            ),
            "classes": ("collapse",),
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    def thumbnail_preview(self, obj):
        if obj.thumbnail_url:
            return format_html(
                '<img src="{}" style="max-width: 50px; max-height: 50px;" />',
                obj.thumbnail_url,
            )
        return "-"

    thumbnail_preview.short_description = "Preview"

    def caption_preview(self, obj):
        return obj.caption[:60] + "..." if len(obj.caption) > 60 else obj.caption

    caption_preview.short_description = "Caption"

    def dimensions(self, obj):
        if obj.width and obj.height:
            return f"{obj.width}x{obj.height}"
        return "-"

    dimensions.short_description = "Size"


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    form = PostAdminForm
    list_display = [
        "title",
        "section_path",
        "byline",
        "published_at",
        "is_published",
        "slug",
    ]
    list_filter = ["published_at", "series__blog"]
    search_fields = ["title", "subtitle", "body", "authors__name"]
    raw_id_fields = ["image"]
    filter_horizontal = ["authors"]
    date_hierarchy = "published_at"
    readonly_fields = ["slug", "created_at", "updated_at"]

    fieldsets = (
        (None, {
            "fields": ("title", "subtitle", "teaser", "body", "authors")
        }),
        ("Placement", {
            "fields": ("section_path", "series", "image", "embed_url")
        }),
        ("Publishing", {
            "fields": ("published_at", "slug")
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["publish_posts", "unpublish_posts"]

    @admin.display(boolean=True, description="Live")
    def is_published(self, obj):
        return obj.is_published

    @admin.action(description="Publish selected posts now")
    def publish_posts(self, request, queryset):
        now = timezone.now()
        for post in queryset:
            post.publish(now)
        self.message_user(request, f"{queryset.count()} posts published.")

    @admin.action(description="Unpublish selected posts")
    def unpublish_posts(self, request, queryset):
        count = 0
        for post in queryset:
            post.unpublish()
            count += 1
        self.message_user(request, f"{count} posts unpublished.")


class BlogSeriesInline(admin.TabularInline):
    """Inline for managing series on a blog."""

    model = BlogSeries
    extra = 1
    fields = ["name", "description"]


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "created_at"]
    search_fields = ["name", "description"]
    prepopulated_fields = {"slug": ("name",)}
    inlines = [BlogSeriesInline]


@admin.register(BlogSeries)
class BlogSeriesAdmin(admin.ModelAdmin):
    list_display = ["name", "blog", "created_at"]
    list_filter = ["blog"]
    search_fields = ["name", "description"]

"""
URL configuration for django-newsroom.

Include in your project urls.py:

    path('', include('newsroom.urls')),
"""
from django.urls import path, re_path

from . import api, views

app_name = "newsroom"

urlpatterns = [
    # Posts
    path("", views.PostListView.as_view(), name="post_list"),
    path("sections/<path:section>/", views.PostListView.as_view(), name="section_posts"),
    re_path(
        r"^(?P<friendly_id>\d{4}/\d{2}/\d{2}/[a-z0-9_-]+)/$",
        views.PostDetailView.as_view(),
        name="post_detail",
    ),

    # Blogs
    path("blogs/<slug:blog_slug>/tagged/<path:tag>/", views.BlogTaggedView.as_view(), name="blog_tagged"),

    # Editorial screens
    path("editor/blog-series/", views.BlogSeriesListView.as_view(), name="blog_series_index"),
    path("editor/blog-series/new/", views.BlogSeriesCreateView.as_view(), name="blog_series_new"),
    path("editor/blog-series/<int:pk>/edit/", views.BlogSeriesUpdateView.as_view(), name="blog_series_edit"),
    path("editor/blog-series/<int:pk>/delete/", views.BlogSeriesDeleteView.as_view(), name="blog_series_delete"),

    # JSON API
    path("api/images/", api.ImageCollectionView.as_view(), name="api_images"),
    path("api/images/<int:pk>/", api.ImageDetailView.as_view(), name="api_image"),
    path("api/posts/", api.PostCollectionView.as_view(), name="api_posts"),
    path("api/posts/<int:pk>/", api.PostDetailView.as_view(), name="api_post"),
]

"""
Views for django-newsroom.
"""
import logging

from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.shortcuts import get_object_or_404
from django.urls import reverse_lazy
from django.utils.safestring import mark_safe
from django.views.generic import (
    CreateView,
    DeleteView,
    DetailView,
    ListView,
    UpdateView,
)

from .conf import newsroom_settings
from .forms import BlogSeriesForm
from .models import Blog, BlogSeries, Post
from .taxonomy import Taxonomy

logger = logging.getLogger(__name__)


class PostListView(ListView):
    """List visible posts, optionally within a section."""

    template_name = "newsroom/post_list.html"
    context_object_name = "posts"
    paginate_by = newsroom_settings.POSTS_PER_PAGE

    def get_queryset(self):
        qs = Post.objects.select_related("image").prefetch_related("authors")
        self.taxonomy = Taxonomy("sections", self.kwargs.get("section", ""))
        return qs.section(self.taxonomy)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["taxonomy"] = self.taxonomy
        return context


class PostDetailView(DetailView):
    """Display a visible post by its friendly id."""

    template_name = "newsroom/post_detail.html"
    context_object_name = "post"

    def get_object(self, queryset=None):
        return get_object_or_404(Post.objects, slug=self.kwargs["friendly_id"])

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["rendered_body"] = mark_safe(self.object.render_body())
        return context


class BlogTaggedView(ListView):
    """Visible posts of one series in a blog."""

    template_name = "newsroom/blog_tagged.html"
    context_object_name = "posts"
    paginate_by = newsroom_settings.POSTS_PER_PAGE

    def get_queryset(self):
        self.blog = get_object_or_404(Blog, slug=self.kwargs["blog_slug"])
        self.series = get_object_or_404(BlogSeries, blog=self.blog, name=self.kwargs["tag"])
        return Post.objects.filter(series=self.series).prefetch_related("authors")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["blog"] = self.blog
        context["series"] = self.series
        return context


class StaffRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """Editorial screens are for staff users only."""

    def test_func(self):
        return self.request.user.is_staff


class BlogSeriesListView(StaffRequiredMixin, ListView):
    model = BlogSeries
    template_name = "newsroom/admin/blog_series_list.html"
    context_object_name = "blog_series"
    paginate_by = newsroom_settings.SERIES_PER_PAGE

    def get_queryset(self):
        return BlogSeries.objects.select_related("blog")


class BlogSeriesCreateView(StaffRequiredMixin, CreateView):
    model = BlogSeries
    form_class = BlogSeriesForm
    template_name = "newsroom/admin/blog_series_form.html"
    success_url = reverse_lazy("newsroom:blog_series_index")

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info("Blog series %s created by %s", self.object, self.request.user)
        return response


class BlogSeriesUpdateView(StaffRequiredMixin, UpdateView):
    """Edit a series, then show it as readers see it."""

    model = BlogSeries
    form_class = BlogSeriesForm
    template_name = "newsroom/admin/blog_series_form.html"

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info("Blog series %s updated by %s", self.object, self.request.user)
        return response

    def get_success_url(self):
        return self.object.get_absolute_url()


class BlogSeriesDeleteView(StaffRequiredMixin, DeleteView):
    model = BlogSeries
    template_name = "newsroom/admin/blog_series_confirm_delete.html"
    success_url = reverse_lazy("newsroom:blog_series_index")

    def form_valid(self, form):
        logger.info("Blog series %s deleted by %s", self.object, self.request.user)
        return super().form_valid(form)

"""
JSON API for django-newsroom.

Reads are public. Writes require HTTP Basic credentials and answer with:

- 201 and the image on create
- 204 on update and delete
- 422 and ``{field: [messages]}`` on invalid data
"""
import json
import logging

from django.http import HttpResponse, JsonResponse, QueryDict
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .auth import basic_auth_required
from .forms import ImageForm
from .models import Image, Post
from .taxonomy import Taxonomy

logger = logging.getLogger(__name__)


def not_found():
    return JsonResponse({"error": "Not found"}, status=404)


def no_content():
    return HttpResponse(status=204)


def validation_errors(form):
    return JsonResponse(
        {field: list(errors) for field, errors in form.errors.items()},
        status=422,
    )


def parse_body(request):
    """
    Return submitted fields for any method.

    Django only parses POST bodies itself; PUT bodies are read here as JSON
    or as form-encoded data.
    """
    if request.content_type == "application/json":
        try:
            data = json.loads(request.body or b"{}")
        except ValueError:
            return None
        return data if isinstance(data, dict) else None
    if request.method == "POST":
        return request.POST
    return QueryDict(request.body, encoding=request.encoding)


@method_decorator(csrf_exempt, name="dispatch")
class ImageCollectionView(View):
    """List and create images."""

    def get(self, request):
        images = Image.objects.all()
        return JsonResponse([image.to_dict() for image in images], safe=False)

    @method_decorator(basic_auth_required)
    def post(self, request):
        data = parse_body(request)
        if data is None:
            return JsonResponse({"error": "Malformed request body"}, status=400)

        form = ImageForm(data, request.FILES)
        if not form.is_valid():
            return validation_errors(form)

        image = form.save()
        logger.info("Image %s created by %s", image.pk, request.user)
        return JsonResponse(image.to_dict(), status=201)


@method_decorator(csrf_exempt, name="dispatch")
class ImageDetailView(View):
    """Show, update and delete a single image."""

    def get(self, request, pk):
        image = Image.objects.filter(pk=pk).first()
        if image is None:
            return not_found()
        return JsonResponse(image.to_dict())

    @method_decorator(basic_auth_required)
    def put(self, request, pk):
        image = Image.objects.filter(pk=pk).first()
        if image is None:
            return not_found()

        data = parse_body(request)
        if data is None:
            return JsonResponse({"error": "Malformed request body"}, status=400)

        form = ImageForm.for_update(image, data)
        if not form.is_valid():
            return validation_errors(form)

        form.save()
        logger.info("Image %s updated by %s", image.pk, request.user)
        return no_content()

    @method_decorator(basic_auth_required)
    def delete(self, request, pk):
        image = Image.objects.filter(pk=pk).first()
        if image is None:
            return not_found()

        image.delete()
        logger.info("Image %s deleted by %s", pk, request.user)
        return no_content()


class PostCollectionView(View):
    """
    List visible posts.

    ``?section=News/University`` limits the list to that section and its
    subsections.
    """

    def get(self, request):
        posts = Post.objects.prefetch_related("authors")
        section = request.GET.get("section")
        if section:
            posts = posts.section(Taxonomy("sections", section))
        return JsonResponse([post.to_dict() for post in posts], safe=False)


class PostDetailView(View):
    def get(self, request, pk):
        post = Post.objects.filter(pk=pk).first()
        if post is None:
            return not_found()
        return JsonResponse(post.to_dict())

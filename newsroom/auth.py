"""
HTTP Basic authentication for the JSON API.
"""
import base64
import binascii
import logging
from functools import wraps

from django.contrib.auth import authenticate
from django.http import JsonResponse

from .conf import newsroom_settings

logger = logging.getLogger(__name__)


def get_basic_auth_user(request):
    """Return the active user named in the Authorization header, or None."""
    header = request.META.get("HTTP_AUTHORIZATION", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() != "basic" or not credentials:
        return None

    try:
        decoded = base64.b64decode(credentials.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    username, sep, password = decoded.partition(":")
    if not sep:
        return None

    user = authenticate(request, username=username, password=password)
    if user is None or not user.is_active:
        logger.info("Rejected API credentials for %s", username)
        return None
    return user


def basic_auth_required(view_func):
    """Require HTTP Basic credentials; responds 401 without them."""

    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        user = get_basic_auth_user(request)
        if user is None:
            response = JsonResponse({"error": "Authentication required"}, status=401)
            response["WWW-Authenticate"] = f'Basic realm="{newsroom_settings.API_REALM}"'
            return response
        request.user = user
        return view_func(request, *args, **kwargs)

    return wrapper

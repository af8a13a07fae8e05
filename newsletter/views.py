import json
import logging
import re
import urllib.parse
import urllib.request
from collections.abc import Mapping
from urllib.error import HTTPError, URLError

from django.conf import settings

from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(
    r"^([\w-]+(?:\.[\w-]+)*)@((?:[\w-]+\.)*\w[\w-]{0,66})\.([a-z]{2,6}(?:\.[a-z]{2})?)$",
    re.IGNORECASE | re.ASCII,
)


class RelayError(Exception):
    pass


def relay_subscription(email: str):
    """POST the address to the subscription API and return its decoded JSON."""
    data = urllib.parse.urlencode({"p_email": email}).encode("utf-8")
    req = urllib.request.Request(settings.NEWSLETTER_API_URL, data=data, method="POST")
    req.add_header("Content-Type", "application/x-www-form-urlencoded")
    try:
        with urllib.request.urlopen(req, timeout=settings.NEWSLETTER_API_TIMEOUT) as r:
            body = r.read().decode("utf-8")
    except HTTPError as e:
        raise RelayError(f"subscription API answered {e.code}") from e
    except URLError as e:
        raise RelayError(f"subscription API unreachable: {e.reason}") from e

    try:
        return json.loads(body) if body.strip() else None
    except json.JSONDecodeError as e:
        raise RelayError("subscription API sent invalid JSON") from e


def send_confirmation(email: str) -> bool:
    """Ask the site mailer to send the welcome e-mail; failures only log."""
    url = settings.NEWSLETTER_CONFIRM_URL
    if not url:
        return False
    req = urllib.request.Request(f"{url}?{urllib.parse.urlencode({'email': email})}", method="GET")
    try:
        with urllib.request.urlopen(req, timeout=settings.NEWSLETTER_API_TIMEOUT) as r:
            r.read()
    except (HTTPError, URLError) as e:
        logger.warning("confirmation e-mail request failed: %s", e)
        return False
    return True


@api_view(["POST"])
@authentication_classes([])
@permission_classes([AllowAny])
def subscribe(request):
    if not isinstance(request.data, Mapping):
        return Response({"error": "missing field: email"}, status=status.HTTP_400_BAD_REQUEST)

    email = str(request.data.get("email", "") or "").strip()
    if not email:
        return Response({"error": "missing field: email"}, status=status.HTTP_400_BAD_REQUEST)
    if not EMAIL_RE.match(email):
        return Response({"error": f"invalid email: {email}"}, status=status.HTTP_400_BAD_REQUEST)

    try:
        result = relay_subscription(email)
    except RelayError as e:
        logger.warning("newsletter subscription failed: %s", e)
        return Response({"error": str(e)}, status=status.HTTP_502_BAD_GATEWAY)

    if result is None:
        return Response({"status": "already_registered"}, status=status.HTTP_409_CONFLICT)

    logger.info("newsletter subscription accepted")
    send_confirmation(email)
    return Response({"status": "subscribed", "email": email}, status=status.HTTP_201_CREATED)

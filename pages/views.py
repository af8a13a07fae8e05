from __future__ import annotations

import logging

from django.conf import settings
from django.http import Http404
from django.shortcuts import render

from .resolver import dispatch, resolve

logger = logging.getLogger(__name__)


def _param(request, name: str) -> str:
    return (request.GET.get(name) or "").strip("/")


def front_controller(request, uri: str = ""):
    """Serve a registered document, or fall through to the default page.

    The identifier comes from ``?uri=`` when given, else from the path.
    """
    identifier = request.GET["uri"] if "uri" in request.GET else uri
    resolution = resolve(identifier)

    if resolution.is_document:
        return dispatch(resolution.artifact)

    return default_page(request, requested_page=resolution.page_name)


def default_page(request, requested_page: str):
    # The page shown never depends on the requested name.
    page_name = settings.DEFAULT_PAGE
    template = settings.PAGE_TEMPLATES.get(page_name)
    if template is None:
        raise Http404("Page not found")

    logger.debug("page %r requested, rendering %r", requested_page, page_name)
    return render(
        request,
        "pages/base.html",
        {
            "page_name": page_name,
            "requested_page": requested_page,
            "api_prefix": _param(request, "api_p1"),
            "content_template": template,
        },
    )

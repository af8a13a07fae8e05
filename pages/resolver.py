from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from django.conf import settings
from django.http import HttpResponse

from .documents import Artifact, ArtifactKind, DocumentRegistry, get_registry

logger = logging.getLogger(__name__)

URN_LEX_RE = re.compile(r"urn:lex:(.+)$")
HOME_PAGE = "home"


@dataclass(frozen=True)
class Resolution:
    page_name: str
    artifact: Artifact | None = None

    @property
    def is_document(self) -> bool:
        return self.artifact is not None


def resolve(identifier: str | None, registry: DocumentRegistry | None = None) -> Resolution:
    """Map a raw identifier to a registered document, or to a page name.

    Slashes are trimmed from both ends; an empty identifier names the home
    page. ``urn:lex:<suffix>`` identifiers whose suffix is an exact registry
    key resolve to that artifact. Everything else is just a page name.
    """
    name = (identifier or "").strip("/")
    if not name:
        return Resolution(page_name=HOME_PAGE)

    m = URN_LEX_RE.search(name)
    if m:
        artifact = (registry if registry is not None else get_registry()).lookup(m.group(1))
        if artifact is not None:
            logger.debug("identifier %r -> document %s", name, artifact.name)
            return Resolution(page_name=name, artifact=artifact)
        logger.debug("identifier %r: no document for suffix %r", name, m.group(1))

    return Resolution(page_name=name)


def dispatch(artifact: Artifact, root: Path | None = None) -> HttpResponse:
    """Build the complete response for a document.

    Read errors (a registered file missing on disk) are not caught.
    """
    target = Path(root if root is not None else settings.DOCUMENT_ROOT) / artifact.path

    if artifact.kind is ArtifactKind.PDF:
        return HttpResponse(target.read_bytes(), content_type="application/pdf")

    # Sent byte for byte; the fragment keeps whatever encoding it was saved in.
    return HttpResponse(target.read_bytes())

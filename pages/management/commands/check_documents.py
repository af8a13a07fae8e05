from pathlib import Path

from bs4 import BeautifulSoup
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from pages.documents import ArtifactKind, get_registry


def _html_title(p: Path) -> str:
    soup = BeautifulSoup(p.read_bytes(), "html.parser")
    node = soup.title or soup.find(["h1", "h2"])
    return node.get_text(" ", strip=True) if node else ""


class Command(BaseCommand):
    help = "Check that every document registered for urn:lex identifiers exists on disk"

    def handle(self, *args, **kwargs):
        registry = get_registry()
        root = Path(settings.DOCUMENT_ROOT)
        missing = []

        for artifact in registry.artifacts():
            target = root / artifact.path
            n_aliases = len(registry.aliases_of(artifact))
            if not target.is_file():
                missing.append(artifact.path)
                self.stdout.write(self.style.ERROR(f"MISSING {artifact.name}: {artifact.path}"))
                continue

            if artifact.kind is ArtifactKind.PDF:
                detail = f"{target.stat().st_size} bytes"
            else:
                detail = _html_title(target) or "(untitled)"
            self.stdout.write(f"ok {artifact.name} [{artifact.kind.value}, {n_aliases} aliases]: {detail}")

        if missing:
            raise CommandError(f"{len(missing)} registered document(s) missing under {root}")

        self.stdout.write(self.style.SUCCESS(f"All {len(registry.artifacts())} documents present."))

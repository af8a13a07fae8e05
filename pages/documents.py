"""Registry of documents addressable by ``urn:lex`` identifier.

The registry is read from ``settings.LEX_DOCUMENTS_FILE`` once per process
and never mutated afterwards. Each named artifact lists the identifier
suffixes (aliases) that resolve to it.
"""
from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Iterator

import yaml
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver

logger = logging.getLogger(__name__)


class ArtifactKind(enum.Enum):
    HTML = "html"
    PDF = "pdf"

    @classmethod
    def for_path(cls, path: str) -> "ArtifactKind":
        # Exact, case-sensitive check on the last three characters.
        return cls.PDF if path[-3:] == "pdf" else cls.HTML


@dataclass(frozen=True)
class Artifact:
    name: str
    path: str

    @property
    def kind(self) -> ArtifactKind:
        return ArtifactKind.for_path(self.path)


class DocumentRegistry(Mapping):
    """Read-only mapping of identifier suffix to :class:`Artifact`."""

    def __init__(self, entries: Mapping[str, Artifact]):
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, suffix: str) -> Artifact:
        return self._entries[suffix]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, suffix: str) -> Artifact | None:
        return self._entries.get(suffix)

    def artifacts(self) -> list[Artifact]:
        """Distinct artifacts, in declaration order."""
        seen: dict[str, Artifact] = {}
        for artifact in self._entries.values():
            seen.setdefault(artifact.name, artifact)
        return list(seen.values())

    def aliases_of(self, artifact: Artifact) -> list[str]:
        return [k for k, v in self._entries.items() if v.name == artifact.name]


def _check_relative(name: str, raw_path: str) -> str:
    p = PurePosixPath(raw_path)
    if p.is_absolute() or ".." in p.parts:
        raise ImproperlyConfigured(f"artifact {name!r}: path must stay inside DOCUMENT_ROOT: {raw_path!r}")
    return raw_path


def parse_registry(data) -> DocumentRegistry:
    if not isinstance(data, dict) or not isinstance(data.get("artifacts"), dict):
        raise ImproperlyConfigured("document registry needs an 'artifacts' mapping")

    entries: dict[str, Artifact] = {}
    for name, spec in data["artifacts"].items():
        if not isinstance(spec, dict) or not spec.get("path"):
            raise ImproperlyConfigured(f"artifact {name!r}: missing path")
        aliases = spec.get("aliases") or []
        if not isinstance(aliases, list) or not aliases:
            raise ImproperlyConfigured(f"artifact {name!r}: aliases must be a non-empty list")

        artifact = Artifact(name=str(name), path=_check_relative(name, str(spec["path"])))
        for alias in aliases:
            alias = str(alias)
            if alias in entries:
                raise ImproperlyConfigured(
                    f"alias {alias!r} declared by both {entries[alias].name!r} and {artifact.name!r}"
                )
            entries[alias] = artifact

    return DocumentRegistry(entries)


def load_registry(path: Path) -> DocumentRegistry:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ImproperlyConfigured(f"document registry not found: {path}")

    registry = parse_registry(yaml.safe_load(text))
    logger.info("loaded %d identifiers for %d documents from %s",
                len(registry), len(registry.artifacts()), path)
    return registry


@lru_cache(maxsize=1)
def get_registry() -> DocumentRegistry:
    return load_registry(settings.LEX_DOCUMENTS_FILE)


@receiver(setting_changed)
def _reset_registry(*, setting, **kwargs):
    if setting == "LEX_DOCUMENTS_FILE":
        get_registry.cache_clear()

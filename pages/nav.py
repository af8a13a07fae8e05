from __future__ import annotations

from dataclasses import dataclass, field
from django.conf import settings


@dataclass
class NavNode:
    title: str
    url: str
    external: bool = False
    children: list["NavNode"] = field(default_factory=list)


def _to_node(item: dict) -> NavNode:
    return NavNode(
        title=item["title"],
        url=item.get("url") or "#!",
        external=bool(item.get("external", False)),
        children=[_to_node(c) for c in item.get("children", []) or []],
    )


def build_nav_tree() -> list[NavNode]:
    """Build the navigation bar from SITE_NAV."""
    return [_to_node(item) for item in getattr(settings, "SITE_NAV", []) or []]

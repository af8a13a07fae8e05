from __future__ import annotations

from typing import Optional

from django import template

register = template.Library()


@register.inclusion_tag("pages/widgets/newsletter.html", takes_context=True)
def newsletter_widget(context, title: str = "Receba nossas novidades", action: Optional[str] = None):
    """E-mail signup form; the script posts it to the newsletter endpoint."""
    return {"title": title, "action": action if action is not None else context.get("newsletter_url", "")}


@register.inclusion_tag("pages/widgets/license.html", takes_context=True)
def license_widget(context, license: dict | None = None):
    """Open-license notice shown in the page footer."""
    lic = license if license is not None else (context.get("site_license") or {})
    return {"license": lic}

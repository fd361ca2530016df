"""Icon catalog offered by the icon picker field."""
from __future__ import annotations

from typing import Any

from django.conf import settings
from django.utils.html import format_html, format_html_join
from django.utils.module_loading import import_string

FA_ICONS: tuple[str, ...] = (
    "fa-adjust",
    "fa-anchor",
    "fa-archive",
    "fa-area-chart",
    "fa-arrows",
    "fa-asterisk",
    "fa-at",
    "fa-ban",
    "fa-bar-chart",
    "fa-barcode",
    "fa-bars",
    "fa-bed",
    "fa-beer",
    "fa-bell",
    "fa-bicycle",
    "fa-binoculars",
    "fa-birthday-cake",
    "fa-bolt",
    "fa-bomb",
    "fa-book",
    "fa-bookmark",
    "fa-briefcase",
    "fa-bug",
    "fa-building",
    "fa-bullhorn",
    "fa-bullseye",
    "fa-bus",
    "fa-calculator",
    "fa-calendar",
    "fa-camera",
    "fa-car",
    "fa-check",
    "fa-child",
    "fa-circle",
    "fa-clock-o",
    "fa-cloud",
    "fa-code",
    "fa-coffee",
    "fa-cog",
    "fa-comment",
    "fa-compass",
    "fa-credit-card",
    "fa-cube",
    "fa-database",
    "fa-desktop",
    "fa-diamond",
    "fa-download",
    "fa-envelope",
    "fa-eye",
    "fa-fax",
    "fa-female",
    "fa-file",
    "fa-film",
    "fa-filter",
    "fa-fire",
    "fa-flag",
    "fa-flask",
    "fa-folder",
    "fa-gamepad",
    "fa-gift",
    "fa-globe",
    "fa-graduation-cap",
    "fa-headphones",
    "fa-heart",
    "fa-home",
    "fa-image",
    "fa-inbox",
    "fa-info",
    "fa-key",
    "fa-laptop",
    "fa-leaf",
    "fa-lemon-o",
    "fa-life-ring",
    "fa-lightbulb-o",
    "fa-link",
    "fa-list",
    "fa-location-arrow",
    "fa-lock",
    "fa-magic",
    "fa-magnet",
    "fa-male",
    "fa-map-marker",
    "fa-microphone",
    "fa-mobile",
    "fa-money",
    "fa-moon-o",
    "fa-music",
    "fa-paper-plane",
    "fa-paw",
    "fa-pencil",
    "fa-phone",
    "fa-picture-o",
    "fa-plane",
    "fa-plug",
    "fa-print",
    "fa-puzzle-piece",
    "fa-question",
    "fa-quote-left",
    "fa-recycle",
    "fa-road",
    "fa-rocket",
    "fa-rss",
    "fa-search",
    "fa-server",
    "fa-share",
    "fa-shield",
    "fa-shopping-cart",
    "fa-signal",
    "fa-sitemap",
    "fa-smile-o",
    "fa-star",
    "fa-suitcase",
    "fa-sun-o",
    "fa-tag",
    "fa-tags",
    "fa-tasks",
    "fa-taxi",
    "fa-thumbs-up",
    "fa-ticket",
    "fa-tint",
    "fa-trash",
    "fa-tree",
    "fa-trophy",
    "fa-truck",
    "fa-umbrella",
    "fa-university",
    "fa-unlock",
    "fa-upload",
    "fa-user",
    "fa-users",
    "fa-video-camera",
    "fa-volume-up",
    "fa-wifi",
    "fa-wrench",
)


def list_icons() -> list[str]:
    """Return the icon classes offered by the picker."""

    provider = getattr(settings, "FIELDKIT_ICON_PROVIDER", None)
    if provider:
        if not callable(provider):
            provider = import_string(provider)
        return list(provider())
    return list(FA_ICONS)


def render_icon_catalog(markup: str, spec: Any = None, field_type: str = "") -> str:
    """Append the hidden icon list shown when the picker opens."""

    items = format_html_join(
        "",
        '<li class="field-icon-item">'
        '<a href="javascript:;" class="field-icon-anchor" data-icon="{}">'
        '<i class="fa fa-fw {}"></i></a></li>',
        ((icon, icon) for icon in list_icons()),
    )
    return markup + format_html(
        '<div class="field-icons-container" style="display:none;"><ul>{}</ul></div>',
        items,
    )

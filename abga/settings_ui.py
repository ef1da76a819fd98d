from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from django.utils.html import escape, format_html
from django.utils.safestring import mark_safe
from django.utils.translation import gettext as _

from . import hooks
from .hosts import ActiveHost, Host


OPTIMIZE_TAB = "optimize"
ANALYTIFY_OPTIMIZE_TAB = "wp-analytify-optimize"
ANALYTIFY_TAB_PRIORITY = "15"

# MonsterInsights tabs that stay ahead of the Optimize tab.
MI_LEADING_TABS = 4

OPTIMIZE_URL = "https://optimize.google.com"


def _container_id_description() -> str:
    return format_html(
        escape(_("This allows you to integrate {}Google Optimize{} with your site.")),
        mark_safe(
            '<a href="%s" target="_blank" rel="noopener noreferrer">' % OPTIMIZE_URL
        ),
        mark_safe("</a>"),
    )


def _page_hiding_description() -> str:
    return _(
        "Turns on page hiding. This will prevent users from seeing content "
        "before its replaced."
    )


def settings_tabs(active: ActiveHost, tabs: Any = None) -> Any:
    """
    Add the Optimize tab to the host's settings tabs.

    MonsterInsights keys its tabs by slug and the tab goes right after
    the first four. Analytify takes a list of tab records and the tab is
    appended with its own priority.
    """
    if active.host is Host.MONSTERINSIGHTS:
        tabs = dict(tabs or {})
        new = {
            OPTIMIZE_TAB: {
                "title": _("Optimize"),
                "level": "lite",
            },
        }
        items = list(tabs.items())
        merged: Dict[str, Any] = {}
        ordered = (
            items[:MI_LEADING_TABS] + list(new.items()) + items[MI_LEADING_TABS:]
        )
        for key, value in ordered:
            merged.setdefault(key, value)
        return merged

    if active.host is Host.ANALYTIFY:
        return list(tabs or []) + [
            {
                "id": ANALYTIFY_OPTIMIZE_TAB,
                "title": _("Optimize"),
                "priority": ANALYTIFY_TAB_PRIORITY,
            }
        ]

    return tabs


def monsterinsights_fields() -> Dict[str, Dict[str, str]]:
    return {
        "optimize_container_id": {
            "id": "optimize_container_id",
            "name": _("Google Optimize Container ID:"),
            "desc": _container_id_description(),
            "type": "text",
        },
        "optimize_page_hiding": {
            "id": "optimize_page_hiding",
            "name": _("Enable Page Hiding"),
            "desc": _page_hiding_description(),
            "type": "checkbox",
        },
    }


def analytify_fields() -> List[Dict[str, str]]:
    return [
        {
            "name": "optimize_container_id",
            "label": _("Google Optimize Container ID:"),
            "desc": _container_id_description(),
            "type": "text",
        },
        {
            "name": "optimize_page_hiding",
            "label": _("Enable Page Hiding"),
            "desc": _page_hiding_description(),
            "type": "checkbox",
        },
    ]


def registered_settings(
    active: ActiveHost,
    settings: Optional[Mapping[str, Any]] = None,
    registry: Optional[hooks.HookRegistry] = None,
) -> Dict[str, Any]:
    """
    Register the container ID and page hiding fields under the host's
    Optimize settings group.

    The MonsterInsights group runs through `monsterinsights_settings_optimize`
    first so other extensions can adjust it.
    """
    settings = dict(settings or {})

    if active.host is Host.MONSTERINSIGHTS:
        registry = registry or hooks.registry
        settings[OPTIMIZE_TAB] = registry.apply_filters(
            hooks.MI_SETTINGS_OPTIMIZE, monsterinsights_fields()
        )
    elif active.host is Host.ANALYTIFY:
        settings[ANALYTIFY_OPTIMIZE_TAB] = analytify_fields()

    return settings

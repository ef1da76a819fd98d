"""
Named filter/action hooks, the extension points the analytics plugins and
the platform expose.

Filters pass a value through every callback and return the result.
Actions emit markup: each callback may return a string and `do_action`
returns the pieces joined together. Callbacks run by ascending priority,
then in the order they were added.
"""
from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Tuple

from django.dispatch import Signal

logger = logging.getLogger(__name__)


DEFAULT_PRIORITY = 10

# Platform
PLUGINS_LOADED = "plugins_loaded"
ADMIN_HEAD = "admin_head"
WP_HEAD = "wp_head"

# MonsterInsights
MI_TRACKING_OPTIONS = "monsterinsights_frontend_tracking_options_before_pageview"
MI_TRACKING_BEFORE = "monsterinsights_tracking_before"
MI_SETTINGS_TABS = "monsterinsights_settings_tabs"
MI_REGISTERED_SETTINGS = "monsterinsights_registered_settings"
MI_SETTINGS_OPTIMIZE = "monsterinsights_settings_optimize"

# Analytify
ANALYTIFY_SETTINGS_TABS = "wp_analytify_pro_setting_tabs"
ANALYTIFY_SETTINGS_FIELDS = "wp_analytify_pro_setting_fields"
ANALYTIFY_ECOMMERCE_JS = "ga_ecommerce_js"


# Sent once per bootstrap with `host` (a hosts.Host) and `active`.
host_detected = Signal()


class HookRegistry:
    def __init__(self) -> None:
        self._hooks: Dict[str, List[Tuple[int, int, Callable]]] = defaultdict(list)
        self._counter = itertools.count()

    def add_filter(
        self, name: str, callback: Callable, priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._hooks[name].append((priority, next(self._counter), callback))
        logger.debug("add_filter: %s priority=%s %r", name, priority, callback)

    add_action = add_filter

    def has_hook(self, name: str) -> bool:
        return bool(self._hooks.get(name))

    def remove_all(self, name: Optional[str] = None) -> None:
        if name is None:
            self._hooks.clear()
        else:
            self._hooks.pop(name, None)

    def _callbacks(self, name: str) -> List[Callable]:
        return [cb for _, _, cb in sorted(self._hooks.get(name, ()), key=lambda e: e[:2])]

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for callback in self._callbacks(name):
            value = callback(value, *args)
        return value

    def do_action(self, name: str, *args: Any) -> str:
        output = []
        for callback in self._callbacks(name):
            emitted = callback(*args)
            if emitted:
                output.append(str(emitted))
        return "".join(output)


registry = HookRegistry()

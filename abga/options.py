"""
Option access for whichever analytics plugin is active.

Every read of plugin configuration goes through `get_option`; nothing else
in the package talks to a host's option store directly.
"""
from __future__ import annotations

from typing import Any, Callable, Protocol

from .hosts import ActiveHost, Host


OPTIMIZE_GROUP = "optimize"
PROFILE_GROUP = "profile"


class SettingsProvider(Protocol):
    def get_option(self, key: str, default: Any, group: str) -> Any: ...


class MonsterInsightsSettings:
    """MonsterInsights keeps a single flat option store; groups are ignored."""

    def __init__(self, get_option: Callable[[str, Any], Any]) -> None:
        self._get_option = get_option

    def get_option(self, key: str, default: Any, group: str) -> Any:
        return self._get_option(key, default)


class AnalytifySettings:
    """Analytify stores options per settings section (`wp-analytify-<group>`)."""

    def __init__(self, settings: Any) -> None:
        self._settings = settings

    def get_option(self, key: str, default: Any, group: str) -> Any:
        return self._settings.get_option(key, f"wp-analytify-{group}", default)


def get_option(
    active: ActiveHost,
    key: str,
    default: Any = False,
    group: str = OPTIMIZE_GROUP,
) -> Any:
    if not active or active.settings is None:
        return default
    return active.settings.get_option(key, default, group)


def container_id(active: ActiveHost) -> str:
    return get_option(active, "optimize_container_id", "") or ""


def optimize_enabled(active: ActiveHost) -> bool:
    """
    True when a container ID is configured.

    Analytify also has to be installing the GA tracking code itself,
    otherwise there is no `ga` object to require Optimize on.
    """
    if active.host is Host.ANALYTIFY:
        install = get_option(active, "install_ga_code", "off", group=PROFILE_GROUP)
        if install != "on":
            return False

    return bool(get_option(active, "optimize_container_id", ""))


def page_hiding_enabled(active: ActiveHost) -> bool:
    return bool(get_option(active, "optimize_page_hiding", False))

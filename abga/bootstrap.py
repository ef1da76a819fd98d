from __future__ import annotations

import logging
import weakref
from functools import partial
from typing import Any, Mapping, Optional

from . import hooks
from .hosts import ActiveHost, Host, HostEnvironment, resolve
from .settings_ui import registered_settings, settings_tabs
from .snippets import (
    frontend_tracking_options,
    render_admin_head_styles,
    render_page_hiding_snippet,
    render_tracking_snippet,
)

logger = logging.getLogger(__name__)


PLUGINS_LOADED_PRIORITY = 11
ADMIN_HEAD_PRIORITY = 100
WP_HEAD_PRIORITY = 9

# Registries that have already been wired, with the host they resolved to.
_initialized: "weakref.WeakKeyDictionary[hooks.HookRegistry, ActiveHost]" = (
    weakref.WeakKeyDictionary()
)


def register(
    registry: hooks.HookRegistry, environment: HostEnvironment
) -> None:
    """Run `init` once the platform has loaded its plugins."""
    registry.add_action(
        hooks.PLUGINS_LOADED,
        partial(_plugins_loaded, registry, environment),
        PLUGINS_LOADED_PRIORITY,
    )


def reset(registry: hooks.HookRegistry) -> None:
    """Forget that `registry` was wired so the next `init` runs again."""
    _initialized.pop(registry, None)


def init(
    registry: hooks.HookRegistry, environment: HostEnvironment
) -> ActiveHost:
    """
    Detect the analytics plugin and subscribe the Optimize callbacks to
    its hooks. Does nothing when neither plugin is active.

    Runs once per registry; later calls return the host resolved the
    first time.
    """
    if registry in _initialized:
        logger.debug("init: registry already initialized, skipping")
        return _initialized[registry]

    active = resolve(environment)
    _initialized[registry] = active
    hooks.host_detected.send(sender=init, host=active.host, active=active)

    if not active:
        logger.info("init: no supported analytics plugin detected")
        return active

    logger.info("init: integrating Google Optimize with %s", active.host.value)

    if active.host is Host.MONSTERINSIGHTS:
        registry.add_filter(
            hooks.MI_TRACKING_OPTIONS, partial(frontend_tracking_options, active)
        )
        registry.add_action(
            hooks.MI_TRACKING_BEFORE, partial(render_page_hiding_snippet, active)
        )
        registry.add_filter(hooks.MI_SETTINGS_TABS, partial(settings_tabs, active))
        registry.add_filter(
            hooks.MI_REGISTERED_SETTINGS,
            partial(_registered_settings, active, registry),
        )
        registry.add_action(
            hooks.ADMIN_HEAD, render_admin_head_styles, ADMIN_HEAD_PRIORITY
        )

    elif active.host is Host.ANALYTIFY:
        registry.add_filter(
            hooks.ANALYTIFY_SETTINGS_TABS, partial(settings_tabs, active)
        )
        registry.add_filter(
            hooks.ANALYTIFY_SETTINGS_FIELDS,
            partial(_registered_settings, active, registry),
        )
        registry.add_action(
            hooks.ANALYTIFY_ECOMMERCE_JS, partial(render_tracking_snippet, active)
        )
        registry.add_action(
            hooks.WP_HEAD,
            partial(render_page_hiding_snippet, active),
            WP_HEAD_PRIORITY,
        )

    return active


def _plugins_loaded(
    registry: hooks.HookRegistry, environment: HostEnvironment
) -> None:
    # Actions emit what they return; the resolved host is not markup.
    init(registry, environment)


def _registered_settings(
    active: ActiveHost,
    registry: hooks.HookRegistry,
    settings: Optional[Mapping[str, Any]] = None,
) -> dict:
    return registered_settings(active, settings, registry)

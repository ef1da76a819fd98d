from __future__ import annotations

import logging

from . import conf
from .hosts import ActiveHost, Host, HostUnavailable, resolve
from .options import container_id, optimize_enabled, page_hiding_enabled

logger = logging.getLogger(__name__)


def optimize(request):
    """
    Expose the Optimize state to templates, e.g. to skip the anti-flicker
    snippet on pages that render their own.

    Resolved per request so option changes made in the analytics plugin
    show up without a restart. A host whose settings cannot be reached
    renders as if no host were present.
    """
    try:
        active = resolve(conf.get_environment())
    except HostUnavailable as exc:
        logger.warning("optimize: analytics plugin unavailable: %s", exc)
        active = ActiveHost(Host.NONE)

    enabled = optimize_enabled(active)

    return {
        "optimize": {
            "host": active.host.value,
            "container_id": container_id(active) if enabled else "",
            "enabled": enabled,
            "page_hiding": enabled and page_hiding_enabled(active),
        }
    }

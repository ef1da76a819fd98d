from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from django.utils.html import escape
from django.utils.safestring import SafeString, mark_safe

from .hosts import ActiveHost
from .options import container_id, optimize_enabled, page_hiding_enabled

logger = logging.getLogger(__name__)


ANALYTICS_TAG = "ga"
PAGE_HIDING_TIMEOUT = 4000

PAGE_HIDING_TEMPLATE = (
    "<style>.async-hide { opacity: 0 !important} </style>\n"
    "<script>(function(a,s,y,n,c,h,i,d,e){s.className+=' '+y;h.start=1*new Date;\n"
    "h.end=i=function(){s.className=s.className.replace(RegExp(' ?'+y),'')};\n"
    "(a[n]=a[n]||[]).hide=h;setTimeout(function(){i();h.end=null},c);h.timeout=c;\n"
    "})(window,document.documentElement,'async-hide','dataLayer',%(timeout)d,\n"
    "{'%(container_id)s':true});</script>"
)

ADMIN_HEAD_STYLES = (
    '<style>.monstericon-optimize::before {font-family: "dashicons";'
    'content: "\\f169";}</style>'
)


def render_tracking_snippet(active: ActiveHost) -> SafeString:
    """
    `ga('require', '<container id>');` for the page's tracking script.

    The container ID is an admin-supplied value and is emitted verbatim.
    """
    if not optimize_enabled(active):
        logger.debug("render_tracking_snippet: optimize disabled for %s", active.host)
        return mark_safe("")

    return mark_safe(
        "%s('require', '%s');" % (ANALYTICS_TAG, container_id(active))
    )


def frontend_tracking_options(
    active: ActiveHost, options: Mapping[str, Any] | None = None
) -> Dict[str, Any]:
    """
    Return `options` with an `optimize_enabled` entry holding the
    arguments of the `require` call, when Optimize is enabled.
    """
    result = dict(options or {})
    if not optimize_enabled(active):
        return result

    result["optimize_enabled"] = "'require', '%s'" % container_id(active)
    return result


def render_page_hiding_snippet(active: ActiveHost) -> SafeString:
    """
    Anti-flicker style and script.

    The page gets the `async-hide` class immediately. It is removed when
    the dataLayer callback fires or after PAGE_HIDING_TIMEOUT milliseconds,
    whichever comes first.
    """
    if not optimize_enabled(active) or not page_hiding_enabled(active):
        logger.debug("render_page_hiding_snippet: page hiding off for %s", active.host)
        return mark_safe("")

    return mark_safe(
        PAGE_HIDING_TEMPLATE
        % {
            "timeout": PAGE_HIDING_TIMEOUT,
            "container_id": escape(container_id(active)),
        }
    )


def render_admin_head_styles() -> SafeString:
    return mark_safe(ADMIN_HEAD_STYLES)

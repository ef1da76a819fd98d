from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .hosts import HostEnvironment


def auto_bootstrap() -> bool:
    return bool(getattr(settings, "ABGA_AUTO_BOOTSTRAP", True))


def get_environment() -> HostEnvironment:
    """
    Build the host environment from `ABGA_ENVIRONMENT`.

    The setting may hold a HostEnvironment, a callable returning one, or
    a dotted path to either. Unset means no analytics plugin is present.
    """
    value = getattr(settings, "ABGA_ENVIRONMENT", None)
    if value is None:
        return HostEnvironment()

    if isinstance(value, str):
        try:
            value = import_string(value)
        except ImportError as exc:
            raise ImproperlyConfigured(
                "ABGA_ENVIRONMENT %r could not be imported: %s" % (value, exc)
            ) from exc

    if callable(value) and not isinstance(value, HostEnvironment):
        value = value()

    if not isinstance(value, HostEnvironment):
        raise ImproperlyConfigured(
            "ABGA_ENVIRONMENT must provide a HostEnvironment, got %r" % (value,)
        )
    return value

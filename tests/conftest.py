"""
Test configuration.

Django is configured in-process; the analytics plugins are stood in for by
the small fakes below.
"""
from __future__ import annotations

import django
import pytest
from django.conf import settings

if not settings.configured:
    settings.configure(
        INSTALLED_APPS=["abga"],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": True,
                "OPTIONS": {
                    "context_processors": ["abga.context_processors.optimize"],
                },
            }
        ],
        USE_I18N=True,
        LANGUAGE_CODE="en",
    )
    django.setup()

from abga import bootstrap, hooks  # noqa: E402
from abga.hosts import ActiveHost, Host, HostEnvironment, resolve  # noqa: E402


class FakeAnalytifySettings:
    """Analytify's settings object: options stored per section."""

    def __init__(self, sections=None):
        self.sections = sections or {}
        self.calls = []

    def get_option(self, key, section, default):
        self.calls.append((key, section, default))
        return self.sections.get(section, {}).get(key, default)


class FakeAnalytify:
    def __init__(self, sections=None):
        self.settings = FakeAnalytifySettings(sections)


def monsterinsights_environment(options=None):
    options = dict(options or {})

    def get_option(key, default=False):
        return options.get(key, default)

    return HostEnvironment(
        capabilities=frozenset({"MonsterInsights"}),
        monsterinsights_get_option=get_option,
    )


def analytify_environment(optimize=None, install_ga_code="on"):
    return HostEnvironment(
        types=frozenset({"WP_Analytify"}),
        analytify=FakeAnalytify(
            {
                "wp-analytify-optimize": dict(optimize or {}),
                "wp-analytify-profile": {"install_ga_code": install_ga_code},
            }
        ),
    )


@pytest.fixture(autouse=True)
def reset_registry():
    hooks.registry.remove_all()
    bootstrap.reset(hooks.registry)
    yield
    hooks.registry.remove_all()
    bootstrap.reset(hooks.registry)


@pytest.fixture
def registry():
    return hooks.HookRegistry()


@pytest.fixture
def mi_active():
    def make(**options) -> ActiveHost:
        return resolve(monsterinsights_environment(options))

    return make


@pytest.fixture
def analytify_active():
    def make(install_ga_code="on", **options) -> ActiveHost:
        return resolve(analytify_environment(options, install_ga_code))

    return make


@pytest.fixture
def no_host():
    return ActiveHost(Host.NONE)

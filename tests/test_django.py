"""Tests for the Django integration: settings, context processor and tags."""

import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.template import Context, Template
from django.test import RequestFactory, override_settings

from abga import conf, hooks
from abga.context_processors import optimize
from abga.hosts import HostEnvironment
from conftest import analytify_environment, monsterinsights_environment


MISSING_ACCESSOR = HostEnvironment(capabilities=frozenset({"MonsterInsights"}))


def mi_environment():
    return monsterinsights_environment({
        "optimize_container_id": "GTM-9",
        "optimize_page_hiding": True,
    })


def test_environment_defaults_to_empty():
    assert conf.get_environment() == HostEnvironment()


def test_environment_from_instance():
    env = analytify_environment()
    with override_settings(ABGA_ENVIRONMENT=env):
        assert conf.get_environment() is env


def test_environment_from_callable():
    with override_settings(ABGA_ENVIRONMENT=mi_environment):
        assert "MonsterInsights" in conf.get_environment().capabilities


def test_environment_from_dotted_path():
    with override_settings(ABGA_ENVIRONMENT="test_django.mi_environment"):
        assert "MonsterInsights" in conf.get_environment().capabilities


def test_environment_bad_path():
    with override_settings(ABGA_ENVIRONMENT="test_django.does_not_exist"):
        with pytest.raises(ImproperlyConfigured):
            conf.get_environment()


def test_environment_wrong_type():
    with override_settings(ABGA_ENVIRONMENT=lambda: {"MonsterInsights": True}):
        with pytest.raises(ImproperlyConfigured):
            conf.get_environment()


def test_context_processor():
    request = RequestFactory().get("/")
    with override_settings(ABGA_ENVIRONMENT=mi_environment):
        context = optimize(request)
    assert context == {
        "optimize": {
            "host": "monsterinsights",
            "container_id": "GTM-9",
            "enabled": True,
            "page_hiding": True,
        }
    }


def test_context_processor_without_host():
    context = optimize(RequestFactory().get("/"))
    assert context["optimize"] == {
        "host": "none",
        "container_id": "",
        "enabled": False,
        "page_hiding": False,
    }


def test_do_action_tag():
    hooks.registry.add_action("wp_head", lambda: "<script>x</script>")
    html = Template('{% load abga_tags %}{% do_action "wp_head" %}').render(Context())
    assert html == "<script>x</script>"


def test_app_ready_bootstraps_default_registry():
    with override_settings(ABGA_ENVIRONMENT=mi_environment):
        apps.get_app_config("abga").ready()
        hooks.registry.do_action(hooks.PLUGINS_LOADED)
    html = Template('{% load abga_tags %}{% do_action "monsterinsights_tracking_before" %}').render(Context())
    assert "'GTM-9':true" in html


def test_app_ready_respects_auto_bootstrap():
    with override_settings(ABGA_AUTO_BOOTSTRAP=False):
        apps.get_app_config("abga").ready()
    assert not hooks.registry.has_hook(hooks.PLUGINS_LOADED)


def test_context_processor_degrades_when_host_unavailable(caplog):
    with override_settings(ABGA_ENVIRONMENT=MISSING_ACCESSOR):
        with caplog.at_level("WARNING", logger="abga.context_processors"):
            context = optimize(RequestFactory().get("/"))
    assert context["optimize"]["host"] == "none"
    assert context["optimize"]["enabled"] is False
    assert "no option accessor" in caplog.text


def test_app_ready_rejects_unavailable_host():
    with override_settings(ABGA_ENVIRONMENT=MISSING_ACCESSOR):
        with pytest.raises(ImproperlyConfigured):
            apps.get_app_config("abga").ready()
    assert not hooks.registry.has_hook(hooks.PLUGINS_LOADED)


def test_app_ready_twice_wires_once():
    with override_settings(ABGA_ENVIRONMENT=mi_environment):
        apps.get_app_config("abga").ready()
        apps.get_app_config("abga").ready()
        hooks.registry.do_action(hooks.PLUGINS_LOADED)
    html = Template('{% load abga_tags %}{% do_action "monsterinsights_tracking_before" %}').render(Context())
    assert html.count("'GTM-9':true") == 1

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured


class AbgaConfig(AppConfig):
    name = "abga"
    verbose_name = "A/B Testing with Google Analytics"

    def ready(self):
        from . import bootstrap, conf, hooks
        from .hosts import HostUnavailable, resolve

        if not conf.auto_bootstrap():
            return

        environment = conf.get_environment()
        try:
            resolve(environment)
        except HostUnavailable as exc:
            raise ImproperlyConfigured("ABGA_ENVIRONMENT: %s" % exc) from exc

        bootstrap.register(hooks.registry, environment)

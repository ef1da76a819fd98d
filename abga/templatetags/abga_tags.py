from django import template
from django.utils.safestring import mark_safe

from .. import hooks

register = template.Library()


@register.simple_tag
def do_action(name, *args):
    """
    Emit the markup registered for an action hook.

    Usage: {% do_action "wp_head" %}
    """
    return mark_safe(hooks.registry.do_action(name, *args))

"""
Template tags that fire host extension points.

Usage::

    {% load hooks %}
    {% apply_filters "stylesheets" base_styles as stylesheets %}
    {% do_action "customer.profile.extra" customer %}
"""
from django import template
from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from common.hooks import registry

register = template.Library()


@register.simple_tag
def apply_filters(name, value=None, *args):
    if value is None:
        value = []
    return registry.apply_filters(name, value, *args)


@register.simple_tag
def do_action(name, *args):
    """Render the fragments returned by every action for ``name`` inline."""
    fragments = registry.do_action(name, *args)
    # Fragments from render_to_string are already SafeStrings; anything else is escaped
    return mark_safe("".join(str(conditional_escape(f)) for f in fragments))

from django import template

from pages.lists import ListComponent

register = template.Library()


@register.simple_tag
def render_list(component):
    """
    Renders a list component.

    Usage in template:
    {% load page_tags %}
    {% render_list page.get_child_member_list %}
    """
    if not isinstance(component, ListComponent):
        return ''
    return component.render()


@register.filter
def field_label(page, name):
    return page.field_label(name)

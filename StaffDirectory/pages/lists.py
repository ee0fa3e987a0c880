import copy

from django.template.loader import render_to_string
from django.utils.text import slugify
from django.utils.translation import pgettext_lazy


def make_style_id(page, *suffixes):
    """
    Builds a deterministic style id for a list rendered by `page`.

    Suffixes (e.g. a category title) are slugified and appended so that
    several lists on one page get different ids:

        make_style_id(page, "Faculty")  ->  "staffpage_12_faculty"
    """
    parts = [f"{page._meta.model_name}_{page.pk}"]
    for suffix in suffixes:
        slug = slugify(str(suffix or ''), allow_unicode=True).replace('-', '_')
        if slug:
            parts.append(slug)
    return '_'.join(parts)


class ListComponent:
    """A source of items plus the settings used to render them as a list."""

    template_name = 'pages/includes/list_component.html'

    default_settings = {
        'hide_no_data_message': False,
        'no_data_message': pgettext_lazy('ListComponent.NODATAAVAILABLE', 'No data available.'),
        'show_summary': True,
        'show_details': True,
    }

    def __init__(self, source=None, style_id=None, **settings):
        self.source = source if source is not None else []
        self.style_id = style_id
        self.settings = {**self.default_settings, **settings}

    def __iter__(self):
        return iter(self.source)

    def __repr__(self):
        return f"<ListComponent {self.style_id!r}>"

    def set_source(self, source):
        self.source = source
        return self

    def set_style_id_from(self, page, *suffixes):
        self.style_id = make_style_id(page, *suffixes)
        return self

    def copy(self):
        clone = copy.copy(self)
        clone.settings = dict(self.settings)
        return clone

    def has_items(self):
        # Querysets answer with an EXISTS query instead of loading rows
        if hasattr(self.source, 'exists'):
            return self.source.exists()
        return bool(self.source)

    def get_context(self):
        return {
            'list': self,
            'items': self.source,
            'style_id': self.style_id,
            'has_items': self.has_items(),
            **self.settings,
        }

    def render(self):
        return render_to_string(self.template_name, self.get_context())


class ListSource:
    """
    Mixin for pages whose items are shown through a list component.

    Subclasses implement get_list_items() and may declare
    `list_view_defaults` to override ListComponent settings.
    """

    list_component_class = ListComponent
    list_view_defaults = {}

    def get_list_items(self):
        raise NotImplementedError(f"{type(self).__name__} must implement get_list_items()")

    def get_list_view_settings(self):
        return dict(self.list_view_defaults)

    def build_list_component(self, source, *style_suffixes):
        component = self.list_component_class(source, **self.get_list_view_settings())
        return component.set_style_id_from(self, *style_suffixes)

    def get_list_component(self):
        return self.build_list_component(self.get_list_items())

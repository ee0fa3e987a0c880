from django import forms

from .models import Page


class RichTextarea(forms.Textarea):
    """Textarea flagged for the admin's rich text editor."""

    def __init__(self, attrs=None):
        default_attrs = {'rows': 10, 'class': 'richtext'}
        if attrs:
            default_attrs.update(attrs)
        super().__init__(attrs=default_attrs)


class PageForm(forms.ModelForm):
    """
    Base edit form for every page type.

    Labels come from the model's field_labels() so that each type can
    rename its fields (a staff member's title is its "Name"), and the
    parent choices only offer pages that accept this type as a child.
    """

    class Meta:
        model = Page
        fields = ['title', 'parent', 'sort', 'show_in_menus', 'content', 'summary_meta']
        widgets = {
            'content': RichTextarea(),
            'summary_meta': RichTextarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        model = self._meta.model

        for name, field in self.fields.items():
            field.label = model.field_label(name)

        if 'parent' not in self.fields:
            return

        # --- Parent choices: only pages whose type accepts this one ---
        queryset = Page.objects.filter(class_name__in=model.allowed_parent_labels())

        if self.instance.pk:
            # Exclude self and descendants
            queryset = queryset.exclude(pk__in=self.instance.get_descendants(include_self=True).values('pk'))

            # Ensure current parent is still available
            if self.instance.parent_id:
                queryset = queryset | Page.objects.filter(pk=self.instance.parent_id)

        self.fields['parent'].queryset = queryset.distinct()
        self.fields['parent'].required = not model.can_be_root

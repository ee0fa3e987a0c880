from django.contrib import admin

from .forms import PageForm
from .models import Page


class PageAdmin(admin.ModelAdmin):
    """
    Admin for page types. Subclasses add their own sections through
    `extra_fieldsets`, which are appended after the main section, the way
    page types add tabs to the edit form.
    """

    form = PageForm
    list_display = ('title', 'class_name', 'parent', 'sort', 'show_in_menus', 'created')
    list_filter = ('class_name', 'show_in_menus')
    search_fields = ('title',)
    ordering = ('parent__id', 'sort', 'title')
    raw_id_fields = ('parent',)
    readonly_fields = ('class_name', 'cms_tree_classes', 'created', 'modified')

    main_fields = ('title', 'parent', 'sort', 'show_in_menus', 'content', 'summary_meta')
    extra_fieldsets = ()

    def get_fieldsets(self, request, obj=None):
        model = self.model
        fieldsets = [
            (model.field_label('main'), {
                'fields': self.main_fields,
            }),
        ]
        fieldsets.extend(self.extra_fieldsets)
        fieldsets.append(('Timestamps', {
            'fields': ('class_name', 'cms_tree_classes', 'created', 'modified'),
            'classes': ('collapse',),
        }))
        return fieldsets

    def cms_tree_classes(self, obj):
        return obj.specific.get_cms_tree_classes() if obj.pk else ''
    cms_tree_classes.short_description = "Tree classes"


admin.site.register(Page, PageAdmin)

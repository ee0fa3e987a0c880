from django.contrib import admin

from pages.admin import PageAdmin

from .forms import StaffCategoryForm, StaffMemberForm, StaffPageForm
from .models import StaffCategory, StaffMember, StaffPage


@admin.register(StaffPage)
class StaffPageAdmin(PageAdmin):
    form = StaffPageForm
    list_display = ('title', 'parent', 'sort', 'member_summary', 'member_count', 'created')
    list_filter = ('member_summary',)

    extra_fieldsets = (
        (StaffPage.field_label('options'), {
            'fields': ('member_summary',),
            'description': StaffPage.field_label('staff_page'),
        }),
    )

    def member_count(self, obj):
        return len(obj.get_members())
    member_count.short_description = "Members"


@admin.register(StaffCategory)
class StaffCategoryAdmin(PageAdmin):
    form = StaffCategoryForm
    list_display = ('title', 'parent', 'sort', 'member_summary', 'show_content', 'member_count')
    list_filter = ('member_summary', 'show_content', 'list_inherit')

    extra_fieldsets = (
        (StaffCategory.field_label('options'), {
            'fields': ('member_summary', 'show_content', 'list_inherit'),
            'description': StaffCategory.field_label('staff_category'),
        }),
    )

    def member_count(self, obj):
        return obj.get_members().count()
    member_count.short_description = "Members"


@admin.register(StaffMember)
class StaffMemberAdmin(PageAdmin):
    form = StaffMemberForm
    list_display = ('title', 'position', 'post_nominals', 'gender', 'parent', 'sort')
    list_filter = ('gender',)
    search_fields = ('title', 'position', 'post_nominals')

    extra_fieldsets = (
        (StaffMember.field_label('details'), {
            'fields': ('gender', 'position', 'post_nominals', 'education'),
        }),
    )

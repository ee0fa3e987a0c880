from django import forms

from pages.forms import PageForm, RichTextarea

from .models import DROPDOWN_DEFAULT, StaffCategory, StaffMember, StaffPage


def member_summary_field(model):
    """Dropdown for a member summary setting; the empty choice means "(default)"."""
    return forms.ChoiceField(
        label=model.field_label('member_summary'),
        choices=[('', ' ')] + StaffCategory.get_member_summary_options(),
        required=False,
        widget=forms.Select(attrs={'data-placeholder': DROPDOWN_DEFAULT}),
    )


class StaffPageForm(PageForm):
    class Meta(PageForm.Meta):
        model = StaffPage
        fields = PageForm.Meta.fields + ['member_summary']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['member_summary'] = member_summary_field(self._meta.model)


class StaffCategoryForm(PageForm):
    class Meta(PageForm.Meta):
        model = StaffCategory
        fields = PageForm.Meta.fields + ['member_summary', 'show_content', 'list_inherit']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['member_summary'] = member_summary_field(self._meta.model)


class StaffMemberForm(PageForm):
    class Meta(PageForm.Meta):
        model = StaffMember
        fields = PageForm.Meta.fields + ['gender', 'position', 'post_nominals', 'education']
        widgets = {
            **PageForm.Meta.widgets,
            'education': RichTextarea(attrs={'rows': 5}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['gender'].choices = StaffMember.get_gender_options()

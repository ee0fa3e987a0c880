import pytest
from django.urls import reverse

from staff.forms import StaffCategoryForm, StaffMemberForm, StaffPageForm
from staff.models import StaffMember


def member_data(target, **overrides):
    data = {
        'title': "Newcomer",
        'parent': target.pk,
        'sort': 0,
        'gender': StaffMember.GENDER_FEMALE,
        'position': "Tutor",
        'post_nominals': "",
        'content': "<p>Profile</p>",
        'summary_meta': "",
        'education': "<p>MA</p>",
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestStaffForms:
    def test_category_member_summary_dropdown(self):
        field = StaffCategoryForm().fields['member_summary']
        assert [value for value, _ in field.choices] == ["", "Content", "SummaryMeta", "Education"]
        assert field.required is False
        assert str(field.widget.attrs['data-placeholder']) == "(default)"
        assert str(field.label) == "Member summary"

    def test_category_show_content_checkbox(self):
        field = StaffCategoryForm().fields['show_content']
        assert str(field.label) == "Show content on staff page"
        assert field.widget.input_type == 'checkbox'

    def test_page_member_summary_dropdown(self):
        assert "member_summary" in StaffPageForm().fields

    def test_member_labels(self):
        form = StaffMemberForm()
        assert str(form.fields['title'].label) == "Name"
        assert str(form.fields['content'].label) == "Profile"
        assert 'richtext' in form.fields['education'].widget.attrs['class']

    def test_member_under_category(self, directory):
        form = StaffMemberForm(data=member_data(directory['faculty']))
        assert form.is_valid(), form.errors
        member = form.save()
        assert member.class_name == "staff.StaffMember"
        assert member.show_in_menus is False
        assert member in directory['faculty'].get_members()

    def test_member_parent_choices_follow_allowed_children(self, directory, settings):
        settings.STAFF_DIRECTORY = {'ALLOW_DIRECT_MEMBERS': False}
        form = StaffMemberForm(data=member_data(directory['page']))
        assert not form.is_valid()
        assert 'parent' in form.errors

    def test_member_requires_parent(self, directory):
        form = StaffMemberForm(data=member_data(directory['faculty'], parent=""))
        assert not form.is_valid()
        assert 'parent' in form.errors

    def test_category_under_category_is_not_offered(self, directory):
        form = StaffCategoryForm(data={'title': "Nested", 'parent': directory['faculty'].pk, 'sort': 0})
        assert not form.is_valid()
        assert 'parent' in form.errors

    def test_editing_excludes_self_and_descendants(self, directory):
        form = StaffPageForm(instance=directory['page'])
        parent_pks = set(form.fields['parent'].queryset.values_list('pk', flat=True))
        assert directory['page'].pk not in parent_pks
        assert directory['faculty'].pk not in parent_pks


@pytest.mark.django_db
class TestAdmin:
    @pytest.mark.parametrize("model_name", ["staffpage", "staffcategory", "staffmember"])
    def test_changelist(self, admin_client, directory, model_name):
        response = admin_client.get(reverse(f"admin:staff_{model_name}_changelist"))
        assert response.status_code == 200

    @pytest.mark.parametrize("model_name", ["staffpage", "staffcategory", "staffmember"])
    def test_add_form(self, admin_client, model_name):
        response = admin_client.get(reverse(f"admin:staff_{model_name}_add"))
        assert response.status_code == 200

    def test_member_change_form_sections(self, admin_client, directory):
        response = admin_client.get(reverse("admin:staff_staffmember_change", args=[directory['ada'].pk]))
        assert response.status_code == 200
        content = response.content.decode()
        assert "Details" in content
        assert "gender-unspecified" in content

    def test_category_change_form_options(self, admin_client, directory):
        response = admin_client.get(reverse("admin:staff_staffcategory_change", args=[directory['faculty'].pk]))
        assert response.status_code == 200
        content = response.content.decode()
        assert "Options" in content
        assert 'data-placeholder="(default)"' in content

    def test_page_admin_lists_all_types(self, admin_client, directory):
        response = admin_client.get(reverse("admin:pages_page_changelist"))
        assert response.status_code == 200
        assert "staff.StaffCategory" in response.content.decode()

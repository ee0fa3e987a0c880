import pytest

from pages.lists import ListComponent
from staff.models import StaffCategory, StaffMember


class TestContentShown:
    @pytest.mark.parametrize("content", ["", "<p>About the faculty</p>"])
    def test_hidden_when_show_content_is_off(self, content):
        category = StaffCategory(title="C", content=content, show_content=False)
        assert category.is_content_shown() is False

    def test_shown_with_content_and_flag(self):
        category = StaffCategory(title="C", content="<p>About</p>", show_content=True)
        assert category.is_content_shown() is True
        assert category.content_shown is True

    def test_hidden_without_content(self):
        assert StaffCategory(title="C", content="", show_content=True).is_content_shown() is False


class TestCategoryOptions:
    def test_member_summary_options_order(self):
        options = StaffCategory.get_member_summary_options()
        assert [value for value, _ in options] == ["Content", "SummaryMeta", "Education"]
        assert [str(label) for _, label in options] == ["Profile", "Summary", "Education"]

    def test_defaults(self):
        category = StaffCategory(title="C")
        assert category.member_summary == ""
        assert category.show_content is False
        assert category.list_inherit is True
        assert category.show_in_menus is False

    def test_allowed_children(self):
        assert StaffCategory.allows_child(StaffMember)
        assert not StaffCategory.allows_child(StaffCategory)
        assert StaffCategory.can_be_root is False

    def test_labels_have_stable_defaults(self):
        labels = StaffCategory.field_labels()
        assert str(labels['member_summary']) == "Member summary"
        assert str(labels['show_content']) == "Show content on staff page"


@pytest.mark.django_db
class TestCategoryMembers:
    def test_get_members_only_own_children(self, directory):
        assert [m.title for m in directory['faculty'].get_members()] == ["Ada", "Alan"]
        assert [m.title for m in directory['staff'].get_members()] == ["Grace"]

    def test_get_members_follows_sort(self, directory):
        directory['ada'].sort = 5
        directory['ada'].save()
        assert [m.title for m in directory['faculty'].get_members()] == ["Alan", "Ada"]

    def test_has_members(self, staff_page, make_category, make_member):
        category = make_category(staff_page, "Empty")
        assert category.has_members() is False
        make_member(category, "First")
        assert category.has_members() is True

    def test_unsaved_category_has_no_members(self, directory):
        assert list(StaffCategory(title="New").get_members()) == []

    def test_list_items_are_members(self, directory):
        faculty = directory['faculty']
        assert list(faculty.get_list_items()) == list(faculty.get_members())


@pytest.mark.django_db
class TestCategoryListComponent:
    def test_inherits_page_list_settings(self, directory):
        component = directory['faculty'].get_list_component()
        assert isinstance(component, ListComponent)
        assert component.settings['hide_no_data_message'] is True
        assert component.style_id == directory['page'].get_member_list(directory['faculty']).style_id
        assert [m.title for m in component] == ["Ada", "Alan"]

    def test_own_list_when_not_inheriting(self, directory):
        faculty = directory['faculty']
        faculty.list_inherit = False
        component = faculty.get_list_component()
        assert component.settings['hide_no_data_message'] is False
        assert component.style_id == f"staffcategory_{faculty.pk}"

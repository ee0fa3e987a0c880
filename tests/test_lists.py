import pytest

from pages.lists import ListComponent, ListSource, make_style_id
from staff.models import StaffMember


@pytest.mark.django_db
class TestStyleId:
    def test_page_only(self, staff_page):
        assert make_style_id(staff_page) == f"staffpage_{staff_page.pk}"

    def test_suffix_is_slugified(self, staff_page):
        assert make_style_id(staff_page, "Teaching Staff") == f"staffpage_{staff_page.pk}_teaching_staff"

    def test_empty_suffix_is_skipped(self, staff_page):
        assert make_style_id(staff_page, "", None) == make_style_id(staff_page)

    def test_deterministic(self, staff_page):
        assert make_style_id(staff_page, "Faculty") == make_style_id(staff_page, "Faculty")


@pytest.mark.django_db
class TestListComponent:
    def test_iterates_over_source(self, directory):
        component = ListComponent(directory['faculty'].get_members())
        assert [m.title for m in component] == ["Ada", "Alan"]

    def test_has_items(self, directory):
        assert ListComponent(directory['faculty'].get_members()).has_items()
        assert not ListComponent(StaffMember.objects.none()).has_items()
        assert not ListComponent([]).has_items()

    def test_settings_override_defaults(self):
        component = ListComponent([], hide_no_data_message=True)
        assert component.settings['hide_no_data_message'] is True
        assert component.settings['show_summary'] is True

    def test_copy_does_not_share_settings(self):
        original = ListComponent([], style_id="a")
        clone = original.copy()
        clone.settings['show_summary'] = False
        assert original.settings['show_summary'] is True
        assert clone.style_id == "a"

    def test_render_lists_items(self, directory):
        html = ListComponent(directory['faculty'].get_members(), style_id="faculty").render()
        assert 'id="faculty"' in html
        assert "Ada" in html and "Alan" in html

    def test_render_empty_shows_no_data_message(self):
        html = ListComponent([]).render()
        assert "No data available." in html

    def test_render_empty_can_hide_message(self):
        html = ListComponent([], hide_no_data_message=True).render()
        assert "No data available." not in html

    def test_render_shows_list_item_details(self, directory):
        ada = directory['ada']
        ada.position = "Professor"
        ada.save()
        html = ListComponent(directory['faculty'].get_members()).render()
        assert "fa-id-card-o" in html
        assert "Professor" in html


def test_list_source_requires_items():
    with pytest.raises(NotImplementedError):
        ListSource().get_list_items()

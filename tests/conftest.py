import pytest

from pages.models import Page
from staff.models import StaffCategory, StaffMember, StaffPage


@pytest.fixture
def staff_page(db):
    return StaffPage.objects.create(title="Our People")


@pytest.fixture
def make_category(db):
    def _make(page, title, **kwargs):
        return StaffCategory.objects.create(title=title, parent=page, **kwargs)
    return _make


@pytest.fixture
def make_member(db):
    def _make(parent, title, **kwargs):
        return StaffMember.objects.create(title=title, parent=parent, **kwargs)
    return _make


@pytest.fixture
def directory(staff_page, make_category, make_member):
    """
    Our People
      Faculty: Ada, Alan
      Staff:   Grace
      Marie (direct member)
    """
    faculty = make_category(staff_page, "Faculty", sort=0)
    staff = make_category(staff_page, "Staff", sort=1)
    return {
        'page': staff_page,
        'faculty': faculty,
        'staff': staff,
        'ada': make_member(faculty, "Ada", sort=0),
        'alan': make_member(faculty, "Alan", sort=1),
        'grace': make_member(staff, "Grace", sort=0),
        'marie': make_member(staff_page, "Marie", sort=2),
    }


@pytest.fixture
def root_page(db):
    return Page.objects.create(title="Home")

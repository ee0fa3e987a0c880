import logging
from collections import namedtuple

from django.db import models
from django.utils.text import slugify
from django.utils.translation import pgettext_lazy

from pages.lists import ListSource
from pages.models import Page

from .conf import staff_settings

logger = logging.getLogger(__name__)

# ================
# Member summary options
# ================
# Values are stored on categories and pages; each names the member field
# shown as the member's summary in lists.
SUMMARY_PROFILE = 'Content'
SUMMARY_SUMMARY = 'SummaryMeta'
SUMMARY_EDUCATION = 'Education'

MEMBER_SUMMARY_CHOICES = (
    (SUMMARY_PROFILE, pgettext_lazy('StaffCategory.PROFILE', 'Profile')),
    (SUMMARY_SUMMARY, pgettext_lazy('StaffCategory.SUMMARY', 'Summary')),
    (SUMMARY_EDUCATION, pgettext_lazy('StaffCategory.EDUCATION', 'Education')),
)

SUMMARY_FIELDS = {
    SUMMARY_PROFILE: 'content',
    SUMMARY_SUMMARY: 'summary_meta',
    SUMMARY_EDUCATION: 'education',
}

DROPDOWN_DEFAULT = pgettext_lazy('StaffCategory.DROPDOWNDEFAULT', '(default)')


class StaffMember(Page):
    """An individual member within a staff category."""

    GENDER_MALE = 'male'
    GENDER_FEMALE = 'female'
    GENDER_UNSPECIFIED = 'unspecified'

    GENDER_CHOICES = (
        (GENDER_UNSPECIFIED, pgettext_lazy('StaffMember.UNSPECIFIED', 'Unspecified')),
        (GENDER_FEMALE, pgettext_lazy('StaffMember.FEMALE', 'Female')),
        (GENDER_MALE, pgettext_lazy('StaffMember.MALE', 'Male')),
    )

    gender = models.CharField(max_length=32, choices=GENDER_CHOICES, default=GENDER_UNSPECIFIED)
    position = models.CharField(max_length=255, blank=True, default='')
    post_nominals = models.CharField(max_length=255, blank=True, default='')
    education = models.TextField(blank=True, default='')

    singular_name = pgettext_lazy('StaffMember.SINGULARNAME', 'Staff Member')
    plural_name = pgettext_lazy('StaffMember.PLURALNAME', 'Staff Members')
    description = pgettext_lazy('StaffMember.DESCRIPTION', 'An individual member within a staff category')

    allowed_children = ()
    can_be_root = False
    defaults = {'show_in_menus': False}
    template_name = 'staff/staff_member.html'

    # Details shown under the member's title in lists
    list_item_details = {
        'date': False,
        'position': {
            'icon': 'id-card-o',
            'text': 'position',
        },
    }

    # Fields shown in a details block on the member's own page
    detail_fields = {
        'education': {
            'name': 'education',
            'text': 'education',
        },
    }
    detail_fields_hide_header = True
    detail_fields_use_heading = True

    @classmethod
    def field_labels(cls):
        labels = super().field_labels()
        labels.update({
            'title': pgettext_lazy('StaffMember.NAME', 'Name'),
            'gender': pgettext_lazy('StaffMember.GENDER', 'Gender'),
            'details': pgettext_lazy('StaffMember.DETAILS', 'Details'),
            'content': pgettext_lazy('StaffMember.PROFILE', 'Profile'),
            'position': pgettext_lazy('StaffMember.POSITION', 'Position'),
            'education': pgettext_lazy('StaffMember.EDUCATION', 'Education'),
            'post_nominals': pgettext_lazy('StaffMember.POSTNOMINALS', 'Post-nominals'),
        })
        return labels

    @classmethod
    def get_gender_options(cls):
        return list(cls.GENDER_CHOICES)

    def get_gender_label(self):
        options = dict(self.get_gender_options())
        return options.get(self.gender, options[self.GENDER_UNSPECIFIED])

    def get_category(self):
        """The parent of this member: a category, or a staff page for direct members."""
        if self.parent_id is None:
            return None
        return self.parent.specific

    def get_summary_field(self):
        """Name of the field picked by the parent's member summary, or None for the default."""
        parent = self.get_category()
        if parent is None:
            return None
        return SUMMARY_FIELDS.get(getattr(parent, 'member_summary', None) or '')

    def get_meta_summary(self):
        field_name = self.get_summary_field()
        if field_name:
            return getattr(self, field_name)
        return super().get_meta_summary()

    def build_cms_tree_classes(self):
        classes = super().build_cms_tree_classes()
        classes.append(f'gender-{self.gender}')
        return classes

    def get_list_item_details(self):
        details = []
        for key, config in self.list_item_details.items():
            if not config:
                continue
            text = getattr(self, config['text'], '')
            if text:
                details.append({'key': key, 'icon': config.get('icon'), 'text': text})
        return details

    def get_detail_fields(self):
        fields = []
        for key, config in self.detail_fields.items():
            text = getattr(self, config['text'], '')
            if text:
                fields.append({'key': key, 'name': self.field_label(config['name']), 'text': text})
        return fields


class StaffCategory(ListSource, Page):
    """A category within a staff page which holds a series of members."""

    member_summary = models.CharField(max_length=16, blank=True, default='', choices=MEMBER_SUMMARY_CHOICES)
    show_content = models.BooleanField(default=False)
    list_inherit = models.BooleanField(default=True)

    singular_name = pgettext_lazy('StaffCategory.SINGULARNAME', 'Staff Category')
    plural_name = pgettext_lazy('StaffCategory.PLURALNAME', 'Staff Categories')
    description = pgettext_lazy('StaffCategory.DESCRIPTION', 'A category within a staff page which holds a series of members')

    allowed_children = ('staff.StaffMember',)
    default_child = 'staff.StaffMember'
    can_be_root = False
    defaults = {'show_in_menus': False}
    template_name = 'staff/staff_category.html'

    class Meta:
        verbose_name_plural = 'staff categories'

    @classmethod
    def field_labels(cls):
        labels = super().field_labels()
        labels.update({
            'options': pgettext_lazy('StaffCategory.OPTIONS', 'Options'),
            'staff_category': pgettext_lazy('StaffCategory.STAFFCATEGORY', 'Staff Category'),
            'member_summary': pgettext_lazy('StaffCategory.MEMBERSUMMARY', 'Member summary'),
            'show_content': pgettext_lazy('StaffCategory.SHOWCONTENTONSTAFFPAGE', 'Show content on staff page'),
            'list_inherit': pgettext_lazy('StaffCategory.LISTINHERIT', 'Use list settings of staff page'),
        })
        return labels

    @classmethod
    def get_member_summary_options(cls):
        return list(MEMBER_SUMMARY_CHOICES)

    def get_members(self):
        if self.pk is None:
            return StaffMember.objects.none()
        return StaffMember.objects.filter(parent_id=self.pk)

    def has_members(self):
        return self.get_members().exists()

    def get_list_items(self):
        return self.get_members()

    def is_content_shown(self):
        """True if the content of the category is to be shown on the staff page."""
        return bool(self.content and self.show_content)

    @property
    def content_shown(self):
        return self.is_content_shown()

    def get_list_component(self):
        parent = self.parent.specific if self.parent_id else None
        if self.list_inherit and isinstance(parent, StaffPage):
            return parent.get_member_list(self)
        if self.list_inherit and isinstance(parent, ListSource):
            return parent.build_list_component(self.get_members(), self.title)
        return super().get_list_component()


CategoryGroup = namedtuple('CategoryGroup', ['title', 'category', 'members'])


class CategoryGroups:
    """
    The categories of a staff page, each paired with its member list.

    Groups are built while iterating, and every iteration queries afresh.
    """

    def __init__(self, page):
        self.page = page

    def __iter__(self):
        for category in self.page.get_all_categories():
            yield CategoryGroup(category.title, category, self.page.get_member_list(category))


class StaffPage(ListSource, Page):
    """Holds a series of staff members organised into categories."""

    member_summary = models.CharField(max_length=16, blank=True, default='', choices=MEMBER_SUMMARY_CHOICES)

    singular_name = pgettext_lazy('StaffPage.SINGULARNAME', 'Staff Page')
    plural_name = pgettext_lazy('StaffPage.PLURALNAME', 'Staff Pages')
    description = pgettext_lazy('StaffPage.DESCRIPTION', 'Holds a series of staff members organised into categories')

    default_child = 'staff.StaffCategory'
    template_name = 'staff/staff_page.html'

    list_view_defaults = {
        'hide_no_data_message': True,
    }

    @classmethod
    def get_allowed_children(cls):
        if staff_settings()['ALLOW_DIRECT_MEMBERS']:
            return ('staff.StaffCategory', 'staff.StaffMember')
        return ('staff.StaffCategory',)

    @classmethod
    def field_labels(cls):
        labels = super().field_labels()
        labels.update({
            'options': pgettext_lazy('StaffPage.OPTIONS', 'Options'),
            'staff_page': pgettext_lazy('StaffPage.STAFFPAGE', 'Staff Page'),
            'member_summary': pgettext_lazy('StaffPage.MEMBERSUMMARY', 'Member summary'),
        })
        return labels

    def get_list_view_settings(self):
        view_settings = super().get_list_view_settings()
        view_settings.update(staff_settings()['LIST_VIEW_DEFAULTS'])
        return view_settings

    def get_all_categories(self):
        return self.get_children_of_type(StaffCategory, depth=staff_settings()['CHILDREN_DEPTH'])

    def get_child_members(self):
        """
        Members placed directly under this page rather than in a category.
        Empty when direct members are switched off.
        """
        conf = staff_settings()
        if not conf['ALLOW_DIRECT_MEMBERS']:
            return StaffMember.objects.none()
        members = self.get_children_of_type(StaffMember, depth=conf['CHILDREN_DEPTH'])
        return members.filter(parent_id=self.pk)

    def get_members(self):
        """
        Members of every category of this page in category order, followed
        by the direct members. No member is listed twice.
        """
        members = []
        seen = set()
        for category in self.get_all_categories():
            for member in category.get_members():
                if member.pk not in seen:
                    seen.add(member.pk)
                    members.append(member)

        for member in self.get_child_members():
            if member.pk not in seen:
                seen.add(member.pk)
                members.append(member)

        return members

    def get_list_items(self):
        return self.get_members()

    def get_visible_categories(self):
        return CategoryGroups(self)

    def get_child_member_list(self):
        return self.build_list_component(self.get_child_members())

    def get_category_style_suffixes(self):
        """
        Maps each category pk to the suffix of its list's style id: the
        slugified title, with the pk appended when an earlier category
        already uses that slug, or the pk alone when the title has no slug.
        """
        suffixes = {}
        used = set()
        for pk, title in self.get_all_categories().values_list('pk', 'title'):
            slug = slugify(title, allow_unicode=True)
            if not slug:
                suffixes[pk] = str(pk)
            elif slug in used:
                suffixes[pk] = f"{slug}-{pk}"
            else:
                suffixes[pk] = slug
            used.add(slug)
        return suffixes

    def get_member_list(self, category):
        suffix = self.get_category_style_suffixes().get(category.pk, category.title)
        return self.build_list_component(category.get_members(), suffix)

    def get_context(self, request=None):
        context = super().get_context(request)
        context['categories'] = self.get_visible_categories()
        return context

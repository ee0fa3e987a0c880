import logging

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.utils.functional import cached_property
from django.utils.html import strip_tags
from django.utils.text import Truncator, capfirst
from django.utils.translation import pgettext_lazy

from .signals import update_cms_tree_classes

logger = logging.getLogger(__name__)

# Child enumeration depths for Page.all_children()
CHILDREN = 'children'
DESCENDANTS = 'descendants'

ANY_CHILD = '*'


# ================
# Reusable Timestamp Base
# ================
class TimeStampedModel(models.Model):
    created = models.DateTimeField(auto_now_add=True, null=True, blank=True)
    modified = models.DateTimeField(auto_now=True, null=True, blank=True)

    class Meta:
        abstract = True


class Page(TimeStampedModel):
    """
    Base node of the content tree.

    Concrete page types subclass this model (multi-table inheritance) and
    describe themselves through class attributes: names shown to editors,
    the types they accept as children and whether they may sit at the root.
    `class_name` records the declared type so that plain Page rows can be
    filtered by type and turned back into their subclass with `.specific`.
    """

    title = models.CharField(max_length=255)
    parent = models.ForeignKey('self', null=True, blank=True, related_name='children', on_delete=models.CASCADE)
    sort = models.IntegerField(default=0, help_text="Order of the page among its siblings")
    show_in_menus = models.BooleanField(default=True)
    content = models.TextField(blank=True, default='', help_text="Rich text (HTML) body")
    summary_meta = models.TextField(blank=True, default='', help_text="Optional summary used in lists")
    class_name = models.CharField(max_length=100, blank=True, editable=False, db_index=True)

    singular_name = pgettext_lazy('Page.SINGULARNAME', 'Page')
    plural_name = pgettext_lazy('Page.PLURALNAME', 'Pages')
    description = pgettext_lazy('Page.DESCRIPTION', 'Generic content page')

    # Model labels ("app_label.ModelName"), ANY_CHILD, or () for a leaf
    allowed_children = ANY_CHILD
    default_child = None
    can_be_root = True

    # Values applied to new instances for fields not passed explicitly
    defaults = {}

    template_name = 'pages/page.html'

    class Meta:
        ordering = ['sort', 'pk']

    def __init__(self, *args, **kwargs):
        # Rows loaded from the database arrive positionally; only new pages get defaults
        if not args:
            for name, value in self.get_field_defaults().items():
                kwargs.setdefault(name, value)
        super().__init__(*args, **kwargs)

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.class_name:
            self.class_name = self._meta.label
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Type configuration
    # ------------------------------------------------------------------

    @classmethod
    def get_field_defaults(cls):
        return dict(cls.defaults)

    @classmethod
    def get_allowed_children(cls):
        return cls.allowed_children

    @classmethod
    def allows_child(cls, child_model):
        allowed = cls.get_allowed_children()
        if allowed == ANY_CHILD:
            return True
        return child_model._meta.label in allowed

    @classmethod
    def allowed_parent_labels(cls):
        """Labels of every page type that accepts this type as a child."""
        return [
            model._meta.label for model in apps.get_models()
            if issubclass(model, Page) and model.allows_child(cls)
        ]

    @classmethod
    def field_labels(cls):
        return {
            'title': pgettext_lazy('Page.TITLE', 'Title'),
            'parent': pgettext_lazy('Page.PARENT', 'Parent'),
            'sort': pgettext_lazy('Page.SORT', 'Sort order'),
            'show_in_menus': pgettext_lazy('Page.SHOWINMENUS', 'Show in menus'),
            'content': pgettext_lazy('Page.CONTENT', 'Content'),
            'summary_meta': pgettext_lazy('Page.SUMMARYMETA', 'Summary'),
            'main': pgettext_lazy('Page.MAIN', 'Main'),
        }

    @classmethod
    def field_label(cls, name):
        return cls.field_labels().get(name, capfirst(name.replace('_', ' ')))

    @property
    def specific_class(self):
        try:
            return apps.get_model(self.class_name)
        except (LookupError, ValueError):
            return None

    @cached_property
    def specific(self):
        """This page as an instance of its declared type."""
        model = self.specific_class
        if model is None or type(self) is model:
            return self
        return model._default_manager.filter(pk=self.pk).first() or self

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self):
        super().clean()
        child = self.specific_class or type(self)

        if self.parent_id is None:
            if not child.can_be_root:
                raise ValidationError({'parent': ValidationError(
                    "A %(child)s cannot be created at the root level.",
                    code='root_not_allowed',
                    params={'child': child.singular_name},
                )})
            return

        if self.pk and self.parent_id == self.pk:
            raise ValidationError({'parent': ValidationError(
                "A page cannot be its own parent.", code='self_parent',
            )})

        parent = self.parent.specific
        if not parent.allows_child(child):
            raise ValidationError({'parent': ValidationError(
                "A %(parent)s cannot have a %(child)s child.",
                code='child_not_allowed',
                params={'parent': parent.singular_name, 'child': child.singular_name},
            )})

        if self.pk and parent.is_descendant_of(self):
            raise ValidationError({'parent': ValidationError(
                "A page cannot be moved below itself.", code='cycle',
            )})

    # ------------------------------------------------------------------
    # Tree traversal
    # ------------------------------------------------------------------

    def get_ancestors(self, include_self=False):
        """
        Returns ancestors ordered from root -> parent.
        Note: This is O(depth) and does queries per step; OK for moderate depth.
        """
        node = self if include_self else self.parent
        ancestors = []
        while node:
            ancestors.insert(0, node)
            node = node.parent
        return ancestors

    def get_descendants(self, include_self=False):
        """
        Returns all descendants as a queryset, walking the tree one level per query.
        """
        if self.pk is None:
            return Page.objects.none()

        pks = [self.pk] if include_self else []
        seen = {self.pk}
        frontier = [self.pk]
        while frontier:
            level = Page.objects.filter(parent_id__in=frontier).values_list('pk', flat=True)
            frontier = [pk for pk in level if pk not in seen]
            seen.update(frontier)
            pks.extend(frontier)
        return Page.objects.filter(pk__in=pks)

    def all_children(self, depth=CHILDREN):
        """
        Child pages of every type, regardless of show_in_menus.

        `depth` is CHILDREN for immediate children or DESCENDANTS for the
        whole subtree.
        """
        if self.pk is None:
            return Page.objects.none()
        if depth == DESCENDANTS:
            return self.get_descendants()
        return Page.objects.filter(parent_id=self.pk)

    def get_children_of_type(self, model, depth=CHILDREN):
        """Children whose declared type is exactly `model`, as `model` instances."""
        matching = self.all_children(depth).filter(class_name=model._meta.label)
        return model.objects.filter(pk__in=matching.values('pk'))

    def get_siblings(self, include_self=False):
        """
        Returns all siblings ordered by 'sort'.
        If include_self=True, includes the current page as well.
        """
        qs = Page.objects.filter(parent_id=self.parent_id)
        return qs if include_self else qs.exclude(pk=self.pk)

    def is_descendant_of(self, node):
        """Check if this page is a descendant of the given page."""
        ancestor = self.parent
        while ancestor:
            if ancestor.pk == node.pk:
                return True
            ancestor = ancestor.parent
        return False

    def is_root(self):
        return self.parent_id is None

    def get_root(self):
        node = self
        while node.parent:
            node = node.parent
        return node

    def _reorder_siblings(self):
        """Ensure siblings are numbered 0..n-1 by their current order."""
        siblings = self.get_siblings(include_self=True)
        for idx, sib in enumerate(siblings):
            if sib.sort != idx:
                sib.sort = idx
                sib.save(update_fields=['sort'])

    def move_to(self, new_parent, new_sort=None):
        """
        Move this page below a new parent (None for the root) and optionally
        to a new position. The move is checked against the parent's allowed
        children before anything is written.
        """
        if new_parent is not None and (new_parent.pk == self.pk or new_parent.is_descendant_of(self)):
            raise ValueError("Cannot move a page to itself or its descendant.")

        self.parent = new_parent
        if new_sort is not None:
            self.sort = new_sort
        self.full_clean()

        with transaction.atomic():
            self.save()
            self._reorder_siblings()

        logger.debug(f"Moved page {self.pk} under {new_parent.pk if new_parent else 'root'}.")

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def get_meta_summary(self):
        """
        The summary shown for this page in lists: the summary field when
        filled in, otherwise the opening words of the content.
        """
        if self.summary_meta:
            return self.summary_meta
        words = getattr(settings, 'PAGES_SUMMARY_WORDS', 30)
        return Truncator(strip_tags(self.content)).words(words)

    def build_cms_tree_classes(self):
        classes = [self._meta.model_name]
        if not self.show_in_menus:
            classes.append('notinmenu')
        return classes

    def get_cms_tree_classes(self):
        """CSS classes for this page in the CMS tree, after receivers have had their say."""
        classes = self.build_cms_tree_classes()
        update_cms_tree_classes.send(sender=type(self), instance=self, classes=classes)
        return ' '.join(classes)

    def get_template(self):
        return self.template_name

    def get_context(self, request=None):
        return {
            'page': self,
            'request': request,
        }

    def to_dict(self, depth=None):
        """
        Convert the page and its children to a dictionary representation.
        """
        data = {
            'id': self.id,
            'title': self.title,
            'class_name': self.class_name,
            'children': []
        }
        if depth is None or depth > 0:
            for child in self.children.all():
                data['children'].append(child.to_dict(None if depth is None else depth - 1))
        return data

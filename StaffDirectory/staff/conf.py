import logging

from django.conf import settings

from pages.models import CHILDREN, DESCENDANTS

logger = logging.getLogger(__name__)

# Defaults for settings.STAFF_DIRECTORY
#   ALLOW_DIRECT_MEMBERS  staff pages accept members directly, not only through categories
#   CHILDREN_DEPTH        "children" (immediate) or "descendants" (whole subtree) when
#                         a staff page looks for its categories and members
#   LIST_VIEW_DEFAULTS    ListComponent settings merged over StaffPage.list_view_defaults
DEFAULTS = {
    'ALLOW_DIRECT_MEMBERS': True,
    'CHILDREN_DEPTH': CHILDREN,
    'LIST_VIEW_DEFAULTS': {},
}


def staff_settings():
    conf = {**DEFAULTS, **(getattr(settings, 'STAFF_DIRECTORY', None) or {})}

    if conf['CHILDREN_DEPTH'] not in (CHILDREN, DESCENDANTS):
        logger.warning(f"Unknown STAFF_DIRECTORY CHILDREN_DEPTH {conf['CHILDREN_DEPTH']!r}, using {CHILDREN!r}.")
        conf['CHILDREN_DEPTH'] = CHILDREN

    return conf

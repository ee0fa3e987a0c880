from django.dispatch import Signal

# Sent after a page has built its CMS tree classes.
# Receivers get `instance` and `classes` (a list) and may append to it.
update_cms_tree_classes = Signal()

import logging

from django.http import JsonResponse
from django.shortcuts import get_object_or_404, render

from .models import Page

logger = logging.getLogger(__name__)


def page_detail(request, pk):
    """Render any page with the template of its declared type."""
    page = get_object_or_404(Page, pk=pk).specific
    return render(request, page.get_template(), page.get_context(request))


def api_tree(request, root_id=None):
    try:
        depth = int(request.GET.get("depth", 3))  # default 3 levels
    except ValueError:
        return JsonResponse({"error": "depth must be an integer"}, status=400)

    if root_id:
        root = get_object_or_404(Page, pk=root_id)
        return JsonResponse(root.to_dict(depth))

    roots = Page.objects.filter(parent__isnull=True)
    return JsonResponse([r.to_dict(depth) for r in roots], safe=False)


def get_ancestor_nodes(request, node_id):
    node = get_object_or_404(Page, pk=node_id)
    ancestors = node.get_ancestors(include_self=True)
    data = [{"id": n.id, "title": n.title, "class_name": n.class_name} for n in ancestors]
    return JsonResponse({"ancestors": data}, status=200)


def get_descendant_nodes(request, node_id):
    node = get_object_or_404(Page, pk=node_id)
    descendants = node.get_descendants(include_self=True)
    data = [{"id": n.id, "title": n.title, "class_name": n.class_name} for n in descendants]
    logger.debug(f"Listed {len(data)} descendants of page {node.pk}.")
    return JsonResponse({"children": data}, status=200)

from django.http import JsonResponse
from django.shortcuts import get_object_or_404

from .models import StaffCategory, StaffPage


def _member_to_dict(member):
    return {
        "id": member.id,
        "name": member.title,
        "position": member.position,
        "post_nominals": member.post_nominals,
        "gender": member.gender,
        "gender_label": str(member.get_gender_label()),
        "summary": member.get_meta_summary(),
        "parent_id": member.parent_id,
    }


def api_members(request, pk):
    """Members of a staff page, grouped by category, plus the direct members."""
    page = get_object_or_404(StaffPage, pk=pk)

    categories = []
    for group in page.get_visible_categories():
        categories.append({
            "id": group.category.id,
            "title": group.title,
            "content": group.category.content if group.category.is_content_shown() else "",
            "style_id": group.members.style_id,
            "members": [_member_to_dict(m) for m in group.members],
        })

    return JsonResponse({
        "id": page.id,
        "title": page.title,
        "categories": categories,
        "members": [_member_to_dict(m) for m in page.get_child_members()],
    })


def api_category_members(request, pk):
    category = get_object_or_404(StaffCategory, pk=pk)
    return JsonResponse({
        "id": category.id,
        "title": category.title,
        "members": [_member_to_dict(m) for m in category.get_members()],
    })

from django.core.management.base import BaseCommand
from django.db import transaction

from staff.conf import staff_settings
from staff.models import (
    SUMMARY_EDUCATION,
    SUMMARY_PROFILE,
    StaffCategory,
    StaffMember,
    StaffPage,
)


# (category title, member summary, show content, [(name, position, post-nominals, gender, education)])
DEMO_CATEGORIES = [
    ("Faculty", SUMMARY_EDUCATION, True, [
        ("Ada Lovelace", "Professor of Mathematics", "FRS", StaffMember.GENDER_FEMALE, "<p>Analytical Engines</p>"),
        ("Alan Turing", "Reader in Computing", "OBE FRS", StaffMember.GENDER_MALE, "<p>PhD Mathematics, Princeton</p>"),
        ("Sam Rivers", "Lecturer in Physics", "", StaffMember.GENDER_UNSPECIFIED, "<p>PhD Physics</p>"),
    ]),
    ("Staff", SUMMARY_PROFILE, False, [
        ("Grace Hopper", "Systems Administrator", "", StaffMember.GENDER_FEMALE, ""),
        ("Linus Pauling", "Laboratory Manager", "", StaffMember.GENDER_MALE, ""),
    ]),
]

DEMO_DIRECT_MEMBERS = [
    ("Marie Curie", "Head of School", "", StaffMember.GENDER_FEMALE, "<p>Doctorate, University of Paris</p>"),
]


class Command(BaseCommand):
    help = "Seed a demo staff directory (a staff page with categories and members)"

    def add_arguments(self, parser):
        parser.add_argument('--title', default="Our People", help="Title of the staff page to create or reuse")

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding demo staff directory..."))

        with transaction.atomic():
            page, created = StaffPage.objects.get_or_create(
                title=options['title'], parent=None,
                defaults={'content': "<p>Meet the people behind the school.</p>"},
            )
            self.stdout.write(f"{'Created' if created else 'Using'} staff page '{page.title}' (ID: {page.pk})")

            # --- LEVEL 1: Categories ---
            for order, (title, summary, show_content, members) in enumerate(DEMO_CATEGORIES):
                category, _ = StaffCategory.objects.get_or_create(
                    title=title, parent=page,
                    defaults={
                        'sort': order,
                        'member_summary': summary,
                        'show_content': show_content,
                        'content': f"<p>{title} of the school.</p>",
                    },
                )

                # --- LEVEL 2: Members ---
                self._seed_members(category, members)

            # --- Direct members (only when the staff page accepts them) ---
            if staff_settings()['ALLOW_DIRECT_MEMBERS']:
                self._seed_members(page, DEMO_DIRECT_MEMBERS)
            else:
                self.stdout.write("Direct members are disabled; skipping them.")

        self.stdout.write(self.style.SUCCESS(f"Staff page '{page.title}' now lists {len(page.get_members())} members."))

    def _seed_members(self, parent, members):
        for order, (name, position, post_nominals, gender, education) in enumerate(members):
            StaffMember.objects.get_or_create(
                title=name, parent=parent,
                defaults={
                    'sort': order,
                    'position': position,
                    'post_nominals': post_nominals,
                    'gender': gender,
                    'education': education,
                    'content': f"<p>{name} is the {position.lower()}.</p>",
                },
            )

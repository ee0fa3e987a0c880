import logging
import os
import zipfile

import pandas as pd
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from openpyxl.utils.exceptions import InvalidFileException

from staff.conf import staff_settings
from staff.models import StaffCategory, StaffMember, StaffPage

logger = logging.getLogger(__name__)

GENDERS = {value for value, _ in StaffMember.GENDER_CHOICES}


def read_rows(path):
    """
    Reads a CSV or Excel file into a list of dicts with lower-case column
    names and empty strings for missing cells.
    """
    ext = os.path.splitext(path)[1].lower()
    try:
        if ext == '.csv':
            df = pd.read_csv(path, dtype=str, encoding='utf-8-sig')
        elif ext == '.xlsx':
            df = pd.read_excel(path, sheet_name=0, dtype=str, engine='openpyxl')
        else:
            raise CommandError(f"Unsupported file type '{ext}'. Please use a CSV or Excel (.xlsx) file.")
    except (OSError, ValueError, zipfile.BadZipFile, InvalidFileException) as e:
        raise CommandError(f"Error reading file: {e}")

    df = df.fillna('')
    df.columns = [str(c).strip().lower() for c in df.columns]
    return df.to_dict('records')


class Command(BaseCommand):
    help = (
        "Import staff members from a CSV or Excel file into a staff page. "
        "Columns: name, category, position, post_nominals, gender, profile, education. "
        "Rows without a category become direct members of the page."
    )

    def add_arguments(self, parser):
        parser.add_argument('path', help="CSV or .xlsx file to import")
        parser.add_argument('--page', required=True, type=int, help="ID of the staff page to import into")

    def handle(self, *args, **options):
        try:
            page = StaffPage.objects.get(pk=options['page'])
        except StaffPage.DoesNotExist:
            raise CommandError(f"Staff page {options['page']} does not exist.")

        rows = read_rows(options['path'])
        if not rows:
            raise CommandError("File is empty or has no data rows.")

        self.stdout.write(f"Importing {len(rows)} rows into '{page.title}'...")

        created, updated = 0, 0
        failures = []

        for rownum, row in enumerate(rows, start=1):
            try:
                with transaction.atomic():
                    was_created = self._import_row(page, row)
            except (ValueError, ValidationError) as e:
                failures.append({'row': rownum, 'error': str(e)})
                logger.debug(f"Row {rownum} skipped: {e}")
                continue

            if was_created:
                created += 1
            else:
                updated += 1

        for failure in failures:
            self.stdout.write(self.style.ERROR(f"Row {failure['row']}: {failure['error']}"))

        self.stdout.write(self.style.SUCCESS(
            f"Import finished: {created} created, {updated} updated, {len(failures)} failed."
        ))

    def _import_row(self, page, row):
        name = str(row.get('name', '')).strip()
        if not name:
            raise ValueError("name is required")

        category_title = str(row.get('category', '')).strip()
        if category_title:
            parent = self._get_category(page, category_title)
        elif staff_settings()['ALLOW_DIRECT_MEMBERS']:
            parent = page
        else:
            raise ValueError("category is required when direct members are disabled")

        gender = str(row.get('gender', '')).strip().lower() or StaffMember.GENDER_UNSPECIFIED
        if gender not in GENDERS:
            logger.warning(f"Unknown gender {gender!r} for '{name}', using unspecified.")
            gender = StaffMember.GENDER_UNSPECIFIED

        member = StaffMember.objects.filter(title=name, parent_id=parent.pk).first()
        was_created = member is None
        if was_created:
            member = StaffMember(title=name, parent=parent, sort=parent.children.count())

        member.gender = gender
        member.position = str(row.get('position', '')).strip()
        member.post_nominals = str(row.get('post_nominals', '')).strip()
        member.content = str(row.get('profile', '')).strip()
        member.education = str(row.get('education', '')).strip()
        member.full_clean()
        member.save()
        return was_created

    def _get_category(self, page, title):
        category = page.get_all_categories().filter(title=title).first()
        if category is None:
            category = StaffCategory(title=title, parent=page, sort=page.children.count())
            category.full_clean()
            category.save()
            self.stdout.write(f"Created category '{title}'.")
        return category

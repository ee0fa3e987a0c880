import django.db.models.deletion
from django.db import migrations, models

import pages.lists


MEMBER_SUMMARY_CHOICES = [
    ('Content', 'Profile'),
    ('SummaryMeta', 'Summary'),
    ('Education', 'Education'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('pages', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='StaffMember',
            fields=[
                ('page_ptr', models.OneToOneField(auto_created=True, on_delete=django.db.models.deletion.CASCADE, parent_link=True, primary_key=True, serialize=False, to='pages.page')),
                ('gender', models.CharField(choices=[('unspecified', 'Unspecified'), ('female', 'Female'), ('male', 'Male')], default='unspecified', max_length=32)),
                ('position', models.CharField(blank=True, default='', max_length=255)),
                ('post_nominals', models.CharField(blank=True, default='', max_length=255)),
                ('education', models.TextField(blank=True, default='')),
            ],
            options={
                'ordering': ['sort', 'pk'],
            },
            bases=('pages.page',),
        ),
        migrations.CreateModel(
            name='StaffCategory',
            fields=[
                ('page_ptr', models.OneToOneField(auto_created=True, on_delete=django.db.models.deletion.CASCADE, parent_link=True, primary_key=True, serialize=False, to='pages.page')),
                ('member_summary', models.CharField(blank=True, choices=MEMBER_SUMMARY_CHOICES, default='', max_length=16)),
                ('show_content', models.BooleanField(default=False)),
                ('list_inherit', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name_plural': 'staff categories',
                'ordering': ['sort', 'pk'],
            },
            bases=(pages.lists.ListSource, 'pages.page'),
        ),
        migrations.CreateModel(
            name='StaffPage',
            fields=[
                ('page_ptr', models.OneToOneField(auto_created=True, on_delete=django.db.models.deletion.CASCADE, parent_link=True, primary_key=True, serialize=False, to='pages.page')),
                ('member_summary', models.CharField(blank=True, choices=MEMBER_SUMMARY_CHOICES, default='', max_length=16)),
            ],
            options={
                'ordering': ['sort', 'pk'],
            },
            bases=(pages.lists.ListSource, 'pages.page'),
        ),
    ]

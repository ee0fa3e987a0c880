import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Page',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created', models.DateTimeField(auto_now_add=True, null=True)),
                ('modified', models.DateTimeField(auto_now=True, null=True)),
                ('title', models.CharField(max_length=255)),
                ('sort', models.IntegerField(default=0, help_text='Order of the page among its siblings')),
                ('show_in_menus', models.BooleanField(default=True)),
                ('content', models.TextField(blank=True, default='', help_text='Rich text (HTML) body')),
                ('summary_meta', models.TextField(blank=True, default='', help_text='Optional summary used in lists')),
                ('class_name', models.CharField(blank=True, db_index=True, editable=False, max_length=100)),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='pages.page')),
            ],
            options={
                'ordering': ['sort', 'pk'],
            },
        ),
    ]

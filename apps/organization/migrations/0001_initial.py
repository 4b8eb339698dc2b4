# Generated manually for the organization app

import uuid
import apps.organization.models
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion

HEX_COLOR = django.core.validators.RegexValidator('^#[0-9a-fA-F]{6}$', 'Enter a color as #rrggbb.')


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Entity',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('full_name', models.CharField(max_length=300)),
                ('document_number', models.CharField(blank=True, max_length=30)),
                ('address', models.CharField(blank=True, max_length=300)),
                ('phone', models.CharField(blank=True, max_length=50)),
                ('email', models.EmailField(blank=True, max_length=254)),
                ('website', models.CharField(blank=True, max_length=200)),
                ('logo_url', models.TextField(blank=True)),
                ('brasao_url', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'entities',
                'verbose_name_plural': 'entities',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='AppSettings',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('header_text', models.CharField(blank=True, max_length=300)),
                ('footer_text', models.CharField(blank=True, max_length=300)),
                ('logo_url', models.TextField(blank=True)),
                ('brasao_url', models.TextField(blank=True)),
                ('available_balance', models.DecimalField(decimal_places=2, default=apps.organization.models.default_available_balance, max_digits=14)),
                ('login_background', models.TextField(blank=True)),
                ('login_logo', models.TextField(blank=True)),
                ('login_card_bg_color', models.CharField(default='#ffffff', max_length=7, validators=[HEX_COLOR])),
                ('login_card_text_color', models.CharField(default='#1a1a1a', max_length=7, validators=[HEX_COLOR])),
                ('login_button_bg_color', models.CharField(default='#4c4faf', max_length=7, validators=[HEX_COLOR])),
                ('login_button_text_color', models.CharField(default='#ffffff', max_length=7, validators=[HEX_COLOR])),
                ('login_background_overlay', models.CharField(choices=[('dark', 'Dark'), ('light', 'Light'), ('none', 'None')], default='dark', max_length=10)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('entity', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='organization.entity')),
            ],
            options={
                'db_table': 'app_settings',
                'verbose_name': 'application settings',
                'verbose_name_plural': 'application settings',
            },
        ),
    ]

# Generated manually for the catalog app

import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CatalogItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('description', models.CharField(max_length=500)),
                ('category', models.CharField(blank=True, max_length=100)),
                ('unit', models.CharField(default='un', max_length=20)),
                ('unit_price', models.DecimalField(decimal_places=4, default=Decimal('0'), max_digits=14, validators=[MinValueValidator(Decimal('0'))])),
                ('pncp_catalog', models.CharField(blank=True, max_length=20)),
                ('pncp_classification', models.CharField(blank=True, max_length=200)),
                ('pncp_subclassification', models.CharField(blank=True, max_length=200)),
                ('specification', models.TextField(blank=True)),
                ('keyword1', models.CharField(blank=True, max_length=100)),
                ('keyword2', models.CharField(blank=True, max_length=100)),
                ('keyword3', models.CharField(blank=True, max_length=100)),
                ('keyword4', models.CharField(blank=True, max_length=100)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'catalog_items',
                'ordering': ['description'],
            },
        ),
    ]

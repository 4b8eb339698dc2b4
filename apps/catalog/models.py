from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class CatalogItem(models.Model):
    """
    A material or service the organization buys, optionally mapped to a
    public catalog code (CATMAT/CATSERV classification).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    description = models.CharField(max_length=500)
    category = models.CharField(max_length=100, blank=True)
    unit = models.CharField(max_length=20, default='un')
    unit_price = models.DecimalField(
        max_digits=14,
        decimal_places=4,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )

    # Public catalog mapping
    pncp_catalog = models.CharField(max_length=20, blank=True)
    pncp_classification = models.CharField(max_length=200, blank=True)
    pncp_subclassification = models.CharField(max_length=200, blank=True)

    specification = models.TextField(blank=True)
    keyword1 = models.CharField(max_length=100, blank=True)
    keyword2 = models.CharField(max_length=100, blank=True)
    keyword3 = models.CharField(max_length=100, blank=True)
    keyword4 = models.CharField(max_length=100, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'catalog_items'
        ordering = ['description']

    def __str__(self):
        return f"{self.description} ({self.unit})"

    @property
    def keywords(self):
        return [k for k in (self.keyword1, self.keyword2, self.keyword3, self.keyword4) if k]

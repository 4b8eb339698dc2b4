from django.db import models
import uuid


class Creditor(models.Model):
    """Supplier or service provider that expenses and contracts are owed to."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    document_number = models.CharField(max_length=20, blank=True)
    contact = models.CharField(max_length=100, blank=True)
    email = models.EmailField(max_length=255, blank=True)

    # Address
    cep = models.CharField(max_length=9, blank=True)
    street = models.CharField(max_length=200, blank=True)
    neighborhood = models.CharField(max_length=100, blank=True)
    city = models.CharField(max_length=100, blank=True)
    uf = models.CharField(max_length=2, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'creditors'
        ordering = ['name']

    def __str__(self):
        return self.name

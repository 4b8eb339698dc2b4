from django.db import models
from django.core.validators import MinValueValidator
import uuid


class ContractStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    PENDING = 'pending', 'Pending'
    EXPIRED = 'expired', 'Expired'
    CANCELLED = 'cancelled', 'Cancelled'


TERMINAL_STATUSES = (ContractStatus.EXPIRED, ContractStatus.CANCELLED)


class BalanceStatus(models.TextChoices):
    OK = 'ok', 'OK'
    WARNING = 'warning', 'Warning'
    CRITICAL = 'critical', 'Critical'
    EXCEEDED = 'exceeded', 'Exceeded'


class Contract(models.Model):
    """
    Supply/service contract with its line items.

    Items live in a single JSON list on the row and are always read and
    written as a whole. Each item is a dict with the keys ``id``,
    ``catalog_item_id``, ``description``, ``unit``, ``quantity``,
    ``unit_price`` and ``consumed``; list order is insertion order.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    number = models.CharField(max_length=50)
    description = models.CharField(max_length=500)
    creditor = models.ForeignKey(
        'creditors.Creditor',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='contracts'
    )
    status = models.CharField(
        max_length=20,
        choices=ContractStatus.choices,
        default=ContractStatus.ACTIVE
    )
    start_date = models.DateField()
    end_date = models.DateField()
    notes = models.TextField(blank=True)

    # Days before end_date at which to raise reminders
    alert_new_contract = models.PositiveIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0)]
    )
    alert_additive = models.PositiveIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0)]
    )

    items = models.JSONField(default=list, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'contracts'
        indexes = [
            models.Index(fields=['status', 'end_date'], name='contracts_status_end_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.number} - {self.description}"

    @property
    def is_terminal(self):
        return self.status in TERMINAL_STATUSES

    def get_item(self, item_id):
        """Return the item dict with this id, or None."""
        for item in self.items or []:
            if str(item.get('id')) == str(item_id):
                return item
        return None

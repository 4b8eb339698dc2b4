from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class ExpenseType(models.TextChoices):
    FIXED = 'fixed', 'Fixed'
    VARIABLE = 'variable', 'Variable'


class ExpenseStatus(models.TextChoices):
    PAID = 'paid', 'Paid'
    PENDING = 'pending', 'Pending'
    # Never stored; derived when an unpaid expense is past due
    OVERDUE = 'overdue', 'Overdue'


class Category(models.Model):
    """Expense category (fixed or variable), with an optional display color."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    type = models.CharField(
        max_length=10,
        choices=ExpenseType.choices,
        default=ExpenseType.VARIABLE
    )
    color = models.CharField(max_length=7, blank=True)

    class Meta:
        db_table = 'categories'
        verbose_name_plural = 'categories'
        ordering = ['name']

    def __str__(self):
        return self.name


class Expense(models.Model):
    """
    A payable expense.

    Only ``paid`` and ``pending`` are stored. An unpaid expense whose due
    date has passed is reported as ``overdue`` by ``display_status``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    description = models.CharField(max_length=500)
    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    type = models.CharField(
        max_length=10,
        choices=ExpenseType.choices,
        default=ExpenseType.VARIABLE
    )
    due_date = models.DateField()
    # Reference month label, e.g. "2025-03"
    month = models.CharField(max_length=20, blank=True)
    status = models.CharField(
        max_length=10,
        choices=ExpenseStatus.choices,
        default=ExpenseStatus.PENDING
    )

    # References are cleared, never cascaded
    creditor = models.ForeignKey(
        'creditors.Creditor',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses'
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses'
    )
    contract = models.ForeignKey(
        'contracts.Contract',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    paid_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['status', 'due_date'], name='expenses_status_due_idx'),
            models.Index(fields=['paid_at'], name='expenses_paid_at_idx'),
        ]
        ordering = ['due_date']

    def __str__(self):
        return f"{self.description} ({self.amount})"

    @property
    def is_paid(self):
        return self.status == ExpenseStatus.PAID

    def display_status(self, today=None):
        """Stored status, or ``overdue`` for unpaid expenses due before today."""
        if self.is_paid:
            return ExpenseStatus.PAID
        today = today or timezone.localdate()
        if self.due_date < today:
            return ExpenseStatus.OVERDUE
        return ExpenseStatus.PENDING

    @property
    def accounting_date(self):
        """Date a paid expense counts towards: paid_at, falling back to created_at."""
        moment = self.paid_at or self.created_at
        if moment is None:
            return None
        if timezone.is_aware(moment):
            moment = timezone.localtime(moment)
        return moment.date()

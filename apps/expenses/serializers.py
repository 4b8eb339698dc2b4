from django.utils import timezone
from rest_framework import serializers
from .models import Category, Expense, ExpenseStatus, ExpenseType


# =============================================================================
# Category
# =============================================================================

class CategorySerializer(serializers.ModelSerializer):
    color = serializers.RegexField(
        r'^#[0-9a-fA-F]{6}$',
        required=False,
        allow_blank=True,
        allow_null=True
    )

    class Meta:
        model = Category
        fields = ['id', 'name', 'type', 'color']
        read_only_fields = ['id']

    def validate_color(self, value):
        return value or ''


# =============================================================================
# Expense input
# =============================================================================

class ExpenseFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for expense filtering.

    Query Parameters:
        status (str): paid, pending or overdue (projected)
        type (str): fixed or variable
        creditor / category / contract (UUID): Filter by reference
        month (str): Reference month label, e.g. "2025-03"
        start_date / end_date (date): Due date range, inclusive
        min_amount / max_amount (decimal): Amount bounds, inclusive
        search (str): Match on description
    """

    status = serializers.ChoiceField(choices=ExpenseStatus.choices, required=False)
    type = serializers.ChoiceField(choices=ExpenseType.choices, required=False)
    creditor = serializers.UUIDField(required=False)
    category = serializers.UUIDField(required=False)
    contract = serializers.UUIDField(required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)
    search = serializers.CharField(max_length=200, required=False)
    month = serializers.CharField(max_length=20, required=False)
    min_amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0, required=False)
    max_amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0, required=False)

    def validate(self, attrs):
        start = attrs.get('start_date')
        end = attrs.get('end_date')
        if start and end and end < start:
            raise serializers.ValidationError({
                'end_date': 'End date must be on or after start date'
            })
        low = attrs.get('min_amount')
        high = attrs.get('max_amount')
        if low is not None and high is not None and high < low:
            raise serializers.ValidationError({
                'max_amount': 'Maximum amount must not be below minimum amount'
            })
        return attrs


class ExportFilterSerializer(ExpenseFilterSerializer):
    """The list filters plus report options."""

    include_metrics = serializers.BooleanField(required=False, default=True)


class ConsumedItemSerializer(serializers.Serializer):
    item_id = serializers.CharField(max_length=64)
    quantity = serializers.DecimalField(max_digits=18, decimal_places=4)


# =============================================================================
# Expense
# =============================================================================

class ExpenseSerializer(serializers.ModelSerializer):
    """
    Expense with its projected status.

    ``overdue`` is accepted on input and stored as ``pending``; on output an
    unpaid expense due before today is reported as ``overdue``.
    """

    creditor_name = serializers.CharField(source='creditor.name', read_only=True, default=None)
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)
    contract_number = serializers.CharField(source='contract.number', read_only=True, default=None)

    class Meta:
        model = Expense
        fields = [
            'id',
            'description',
            'amount',
            'type',
            'due_date',
            'month',
            'status',
            'creditor',
            'creditor_name',
            'category',
            'category_name',
            'contract',
            'contract_number',
            'created_at',
            'paid_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate_status(self, value):
        if value == ExpenseStatus.OVERDUE:
            return ExpenseStatus.PENDING
        return value

    def to_representation(self, instance):
        data = super().to_representation(instance)
        today = self.context.get('today') or timezone.localdate()
        data['status'] = str(instance.display_status(today))
        return data


class ExpenseCreateSerializer(ExpenseSerializer):
    """Expense plus the contract item quantities it consumes."""

    consumed_items = ConsumedItemSerializer(many=True, required=False, write_only=True)

    class Meta(ExpenseSerializer.Meta):
        fields = ExpenseSerializer.Meta.fields + ['consumed_items']

    def validate(self, attrs):
        if attrs.get('consumed_items') and not attrs.get('contract'):
            raise serializers.ValidationError({
                'consumed_items': 'A contract is required to consume items.'
            })
        return attrs

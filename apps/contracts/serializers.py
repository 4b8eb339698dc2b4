from rest_framework import serializers
from .models import Contract, ContractStatus, BalanceStatus
from .services import contract_balance, DIRECTION_CONSUME, DIRECTION_REVERSE


# =============================================================================
# Input Serializers
# =============================================================================

class ContractFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for contract filtering.

    Query Parameters:
        status (str): Filter by contract status
        creditor (UUID): Filter by creditor ID
        search (str): Match on number or description
    """

    status = serializers.ChoiceField(choices=ContractStatus.choices, required=False)
    creditor = serializers.UUIDField(required=False)
    search = serializers.CharField(max_length=200, required=False)


class ContractItemInputSerializer(serializers.Serializer):
    """One line item as submitted by the client."""

    id = serializers.CharField(max_length=64, required=False)
    catalog_item_id = serializers.CharField(max_length=64, required=False, allow_null=True, allow_blank=True)
    description = serializers.CharField(max_length=500)
    unit = serializers.CharField(max_length=20, required=False, default='un')
    quantity = serializers.DecimalField(max_digits=18, decimal_places=4, min_value=0)
    unit_price = serializers.DecimalField(max_digits=18, decimal_places=4, min_value=0)
    consumed = serializers.DecimalField(max_digits=18, decimal_places=4, min_value=0, required=False, default=0)


class SetConsumedInputSerializer(serializers.Serializer):
    """Absolute consumed quantity for one item."""

    consumed = serializers.DecimalField(max_digits=18, decimal_places=4, min_value=0)


class ConsumptionInputSerializer(serializers.Serializer):
    """A consumption movement: add (consume) or subtract (reverse)."""

    amount = serializers.DecimalField(max_digits=18, decimal_places=4)
    direction = serializers.ChoiceField(
        choices=[DIRECTION_CONSUME, DIRECTION_REVERSE],
        required=False,
        default=DIRECTION_CONSUME
    )


# =============================================================================
# Output Serializers
# =============================================================================

class ContractItemBalanceSerializer(serializers.Serializer):
    """Stored item plus derived balance figures."""

    id = serializers.CharField()
    catalog_item_id = serializers.CharField(allow_null=True)
    description = serializers.CharField()
    unit = serializers.CharField()
    quantity = serializers.FloatField()
    unit_price = serializers.FloatField()
    consumed = serializers.FloatField()
    remaining = serializers.FloatField()
    consumed_percentage = serializers.FloatField()
    status = serializers.ChoiceField(choices=BalanceStatus.choices)
    contracted_value = serializers.FloatField()
    consumed_value = serializers.FloatField()
    remaining_value = serializers.FloatField()


class ContractBalanceSerializer(serializers.Serializer):
    contract_id = serializers.UUIDField()
    number = serializers.CharField()
    items = ContractItemBalanceSerializer(many=True)
    contracted_value = serializers.FloatField()
    consumed_value = serializers.FloatField()
    remaining_value = serializers.FloatField()
    has_alerts = serializers.BooleanField()


class ContractSerializer(serializers.ModelSerializer):
    """
    Full contract with items.

    On input ``items`` replaces the whole list. On output each item carries
    its remaining balance and status, and the contract carries its rollups.
    """

    creditor_name = serializers.CharField(source='creditor.name', read_only=True, default=None)
    items = ContractItemInputSerializer(many=True, required=False)

    class Meta:
        model = Contract
        fields = [
            'id',
            'number',
            'description',
            'creditor',
            'creditor_name',
            'status',
            'start_date',
            'end_date',
            'notes',
            'alert_new_contract',
            'alert_additive',
            'items',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_items(self, items):
        ids = [str(item['id']) for item in items if item.get('id')]
        if len(ids) != len(set(ids)):
            raise serializers.ValidationError('Item ids must be unique within a contract.')
        return items

    def validate(self, attrs):
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError({
                'end_date': 'End date must be on or after start date'
            })
        return attrs

    def to_representation(self, instance):
        data = super().to_representation(instance)
        balance = contract_balance(instance)
        data['items'] = balance['items']
        data['contracted_value'] = balance['contracted_value']
        data['consumed_value'] = balance['consumed_value']
        data['remaining_value'] = balance['remaining_value']
        return data


class ContractListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for contract lists."""

    creditor_name = serializers.CharField(source='creditor.name', read_only=True, default=None)
    item_count = serializers.SerializerMethodField()

    class Meta:
        model = Contract
        fields = [
            'id',
            'number',
            'description',
            'creditor',
            'creditor_name',
            'status',
            'start_date',
            'end_date',
            'alert_new_contract',
            'alert_additive',
            'item_count',
            'created_at',
        ]
        read_only_fields = fields

    def get_item_count(self, obj):
        return len(obj.items or [])

    def to_representation(self, instance):
        data = super().to_representation(instance)
        balance = contract_balance(instance)
        data['contracted_value'] = balance['contracted_value']
        data['remaining_value'] = balance['remaining_value']
        data['has_alerts'] = balance['has_alerts']
        return data


class DeadlineAlertSerializer(serializers.Serializer):
    contract_id = serializers.UUIDField()
    number = serializers.CharField()
    description = serializers.CharField()
    end_date = serializers.DateField()
    type = serializers.ChoiceField(choices=['new_contract', 'additive'])
    days_left = serializers.IntegerField()


class BalanceAlertSerializer(serializers.Serializer):
    contract_id = serializers.UUIDField()
    number = serializers.CharField()
    item_id = serializers.CharField()
    description = serializers.CharField()
    remaining_fraction = serializers.FloatField()
    status = serializers.ChoiceField(choices=BalanceStatus.choices)


class ContractAlertsSerializer(serializers.Serializer):
    alerts = DeadlineAlertSerializer(many=True)
    balance_alerts = BalanceAlertSerializer(many=True)

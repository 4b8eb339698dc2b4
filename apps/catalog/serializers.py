from decimal import Decimal
from rest_framework import serializers
from .models import CatalogItem
from .services import KIND_ALIASES, KIND_MATERIAL


class CatalogItemFilterSerializer(serializers.Serializer):
    """
    Query Parameters:
        search (str): Match on description, specification or keywords
        category (str): Exact category (case-insensitive)
        pncp_catalog (str): CATMAT or CATSERV
    """

    search = serializers.CharField(max_length=200, required=False)
    category = serializers.CharField(max_length=100, required=False)
    pncp_catalog = serializers.CharField(max_length=20, required=False)


class CatalogItemSerializer(serializers.ModelSerializer):
    """Catalog item. A blank unit becomes ``un`` and a missing price 0."""

    unit = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    unit_price = serializers.DecimalField(
        max_digits=14,
        decimal_places=4,
        min_value=Decimal('0'),
        required=False,
        allow_null=True
    )

    class Meta:
        model = CatalogItem
        fields = [
            'id',
            'description',
            'category',
            'unit',
            'unit_price',
            'pncp_catalog',
            'pncp_classification',
            'pncp_subclassification',
            'specification',
            'keyword1',
            'keyword2',
            'keyword3',
            'keyword4',
            'notes',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate_unit(self, value):
        return (value or '').strip() or 'un'

    def validate_unit_price(self, value):
        return value if value is not None else Decimal('0')


class PncpSearchSerializer(serializers.Serializer):
    q = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    kind = serializers.ChoiceField(choices=sorted(KIND_ALIASES), required=False, default=KIND_MATERIAL)
    page = serializers.IntegerField(min_value=1, required=False, default=1)


class PncpItemSerializer(serializers.Serializer):
    code = serializers.CharField()
    description = serializers.CharField()
    unit = serializers.CharField(allow_blank=True)
    category = serializers.CharField(allow_blank=True)
    subcategory = serializers.CharField(allow_blank=True)
    catalog = serializers.CharField()


class PncpSearchResultSerializer(serializers.Serializer):
    items = PncpItemSerializer(many=True)
    total = serializers.IntegerField()
    source = serializers.ChoiceField(choices=['remote', 'local'])

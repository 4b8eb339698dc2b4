from rest_framework import serializers
from .models import Creditor


class CreditorFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for creditor listing.

    Query Parameters:
        search (str): Case-insensitive match on name or document number
        uf (str): Two-letter state code
    """

    search = serializers.CharField(max_length=200, required=False)
    uf = serializers.CharField(max_length=2, required=False)


class CreditorSerializer(serializers.ModelSerializer):

    class Meta:
        model = Creditor
        fields = [
            'id',
            'name',
            'document_number',
            'contact',
            'email',
            'cep',
            'street',
            'neighborhood',
            'city',
            'uf',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate_uf(self, value):
        return value.upper()

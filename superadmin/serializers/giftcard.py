from decimal import Decimal

from rest_framework import serializers

from giftcards.serializers import ExpiringEntitySerializer, start_of_today
from services.services import qr_code_url


class GiftCardSerializer(ExpiringEntitySerializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(max_length=100)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'))
    code = serializers.CharField(read_only=True)
    is_paid = serializers.BooleanField(read_only=True)
    usage_limit = serializers.IntegerField(min_value=1, default=1)
    times_used = serializers.IntegerField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    status = serializers.SerializerMethodField()
    qr_code_url = serializers.SerializerMethodField()

    def get_status(self, obj):
        return obj.status()

    def get_qr_code_url(self, obj):
        return qr_code_url(obj.code)

    def create(self, validated_data):
        state = validated_data.pop('state')
        return state.add_card(**validated_data)


class PromotionSerializer(ExpiringEntitySerializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(max_length=100)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'))
    code = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    status = serializers.SerializerMethodField()

    def earliest_expiry(self):
        return start_of_today()

    def get_status(self, obj):
        return obj.status()

    def create(self, validated_data):
        state = validated_data.pop('state')
        return state.add_promotion(**validated_data)

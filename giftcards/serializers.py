from datetime import datetime, time
from decimal import Decimal

from django.utils import timezone
from rest_framework import serializers

from giftcards.models.announcement import CATEGORY_CHOICES
from services.services import qr_code_url


EXPIRY_INPUT_FORMATS = ['iso-8601', '%Y-%m-%d', '%Y-%m-%dT%H:%M']


def start_of_today():
    return timezone.make_aware(datetime.combine(timezone.localdate(), time.min))


class ExpiringEntitySerializer(serializers.Serializer):
    """
    Shared `has_expiration` / `expiry_date` handling. The expiry date is only
    required when `has_expiration` is set, and dropped when it is not.
    Subclasses returning a value from `earliest_expiry` refuse earlier dates.
    """
    has_expiration = serializers.BooleanField(default=False)
    expiry_date = serializers.DateTimeField(
        required=False, allow_null=True, input_formats=EXPIRY_INPUT_FORMATS
    )

    def earliest_expiry(self):
        return None

    def validate(self, data):
        if data.get('has_expiration'):
            if not data.get('expiry_date'):
                raise serializers.ValidationError({
                    'expiry_date': "An expiry date is required when has_expiration is set."
                })
            earliest = self.earliest_expiry()
            if earliest is not None and data['expiry_date'] < earliest:
                raise serializers.ValidationError({
                    'expiry_date': "The expiry date cannot be in the past."
                })
        else:
            data['expiry_date'] = None
        return data


class GiftCardSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    code = serializers.CharField(read_only=True)
    is_paid = serializers.BooleanField(read_only=True)
    expiry_date = serializers.DateTimeField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    status = serializers.SerializerMethodField()
    qr_code_url = serializers.SerializerMethodField()

    def get_status(self, obj):
        return obj.status()

    def get_qr_code_url(self, obj):
        return qr_code_url(obj.code)


class AnnouncementSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    title = serializers.CharField(read_only=True)
    message = serializers.CharField(read_only=True)
    category = serializers.ChoiceField(choices=CATEGORY_CHOICES, read_only=True)
    expiry_date = serializers.DateTimeField(read_only=True)
    countdown = serializers.SerializerMethodField()

    def get_countdown(self, obj):
        return obj.countdown()


class NotificationSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    message = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class RedeemCodeSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=100, error_messages={
        'blank': 'Please enter a gift card code.',
        'required': 'Please enter a gift card code.',
    })


class PlaceOrderSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('1.00'))
    delivery_date = serializers.DateTimeField(input_formats=EXPIRY_INPUT_FORMATS)

    def validate_delivery_date(self, value):
        if timezone.localtime(value).date() < timezone.localdate():
            raise serializers.ValidationError("The delivery date cannot be in the past.")
        return value

    def create(self, validated_data):
        state = validated_data.pop('state')
        return state.place_order(**validated_data)

    def to_representation(self, instance):
        return GiftCardSerializer(instance).data

from django.utils import timezone
from rest_framework import serializers

from giftcards.models.announcement import CATEGORY_CHOICES
from giftcards.serializers import ExpiringEntitySerializer


class AnnouncementSerializer(ExpiringEntitySerializer):
    id = serializers.UUIDField(read_only=True)
    title = serializers.CharField(max_length=200)
    message = serializers.CharField()
    category = serializers.ChoiceField(choices=CATEGORY_CHOICES, default='info')
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    status = serializers.SerializerMethodField()
    countdown = serializers.SerializerMethodField()

    def earliest_expiry(self):
        return timezone.now().replace(second=0, microsecond=0)

    def get_status(self, obj):
        return obj.status()

    def get_countdown(self, obj):
        return obj.countdown()

    def create(self, validated_data):
        state = validated_data.pop('state')
        return state.add_announcement(**validated_data)

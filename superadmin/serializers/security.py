from rest_framework import serializers


class SecuritySettingsSerializer(serializers.Serializer):
    system_enabled = serializers.BooleanField()
    auto_lock = serializers.BooleanField()
    play_sound = serializers.BooleanField()
    request_location = serializers.BooleanField()
    failed_attempts_threshold = serializers.IntegerField(min_value=1)

    def update(self, instance, validated_data):
        # only the fields sent are merged over the current settings
        state = validated_data.pop('state')
        return state.update_security_settings(**validated_data)


class LocationSerializer(serializers.Serializer):
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()


class ThreatSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    timestamp = serializers.DateTimeField(read_only=True)
    reason = serializers.CharField(read_only=True)
    location = LocationSerializer(read_only=True, allow_null=True)
    location_display = serializers.CharField(read_only=True)

from rest_framework import serializers

from accounts.models import Profile, Role


class ProfileSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(read_only=True)
    shown_name = serializers.CharField(read_only=True)
    completeness = serializers.IntegerField(read_only=True)

    class Meta:
        model = Profile
        fields = [
            "id",
            "email",
            "role",
            "name",
            "display_name",
            "shown_name",
            "bio",
            "avatar_url",
            "website_url",
            "location",
            "is_active",
            "completeness",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    display_name = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=100
    )
    bio = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    website_url = serializers.URLField(required=False, allow_blank=True, allow_null=True)
    location = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=100
    )
    avatar_url = serializers.URLField(required=False, allow_blank=True, allow_null=True)


class RoleChangeSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=Role.choices)

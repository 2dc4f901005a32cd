from rest_framework import serializers

from ..formatting import format_location
from ..models import HousingListing, JobListing, Mentor, User


class CurrentUserSerializer(serializers.ModelSerializer):
    """Serializer exposing the signed-in user's identity and profile basics."""

    name = serializers.SerializerMethodField()
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ("id", "email", "role", "name", "image_url")
        read_only_fields = fields

    def _profile(self, obj):
        return getattr(obj, "profile", None)

    def get_name(self, obj):
        return obj.display_name

    def get_image_url(self, obj):
        profile = self._profile(obj)
        if profile is None or not profile.image_url:
            return None
        request = self.context.get("request")
        if request is None:
            return profile.image_url
        return request.build_absolute_uri(profile.image_url)


class ListingSerializer(serializers.ModelSerializer):
    location_display = serializers.SerializerMethodField()
    owned = serializers.SerializerMethodField()

    def get_location_display(self, obj):
        return format_location(obj.location)

    def get_owned(self, obj):
        request = self.context.get("request")
        return obj.is_owned_by(getattr(request, "user", None))


class HousingListingSerializer(ListingSerializer):
    class Meta:
        model = HousingListing
        fields = (
            "id",
            "title",
            "description",
            "price",
            "location",
            "location_display",
            "available_from",
            "available_until",
            "contact_email",
            "contact_phone",
            "created_at",
            "owned",
        )
        read_only_fields = fields


class JobListingSerializer(ListingSerializer):
    class Meta:
        model = JobListing
        fields = (
            "id",
            "title",
            "company",
            "description",
            "job_type",
            "salary",
            "location",
            "location_display",
            "contact_email",
            "contact_phone",
            "created_at",
            "owned",
        )
        read_only_fields = fields


class MentorSerializer(serializers.ModelSerializer):
    name = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True)

    class Meta:
        model = Mentor
        fields = (
            "id",
            "name",
            "image_url",
            "title",
            "bio",
            "expertise",
            "hourly_rate",
            "currency",
            "rating",
            "review_count",
            "badges",
            "availability",
            "languages",
        )
        read_only_fields = fields

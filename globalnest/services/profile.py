from __future__ import annotations

import logging
import os

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils import timezone

from ..exceptions import GeolocationUnavailable
from ..location import Coordinates, location_to_json
from ..models import Profile
from .base import TableService

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "university", "field_of_study", "bio")


def resolve_coordinates(latitude, longitude) -> Coordinates:
    """Turn browser-reported coordinates into a location, or raise."""

    if latitude is None or longitude is None:
        raise GeolocationUnavailable("Failed to get location")
    try:
        lat, lng = float(latitude), float(longitude)
    except (TypeError, ValueError) as exc:
        raise GeolocationUnavailable("Failed to get location") from exc
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        raise GeolocationUnavailable("Failed to get location")
    return Coordinates(lat=lat, lng=lng)


class ProfileService(TableService):
    model = Profile
    label = "profile"

    def __init__(self, context, storage=None):
        super().__init__(context)
        self.storage = storage or default_storage

    def load_own(self) -> Profile:
        with self._remote_call("load profile"):
            profile, _ = Profile.objects.get_or_create(
                user=self.user,
                defaults={"email": self.user.email},
            )
            return profile

    def update_own(self, fields: dict) -> None:
        values = {name: fields[name] for name in PROFILE_FIELDS if name in fields}
        if "location" in fields:
            values["location"] = location_to_json(fields["location"])
        with self._remote_call("update profile"):
            updated = Profile.objects.filter(user=self.user).update(updated_at=timezone.now(), **values)
            if not updated:
                raise Profile.DoesNotExist

    def community(self) -> list[Profile]:
        """Profiles that have shared a location."""

        with self._remote_call("load community profiles"):
            return list(
                Profile.objects.filter(location__isnull=False)
                .select_related("user")
                .order_by("name", "id")
            )

    # Image storage --------------------------------------------------------
    def _image_folder(self) -> str:
        return f"{settings.PROFILE_IMAGE_BUCKET}/{self.user.pk}"

    def _remove_previous_images(self) -> None:
        folder = self._image_folder()
        try:
            _, files = self.storage.listdir(folder)
        except (FileNotFoundError, NotImplementedError):
            return
        except OSError:
            logger.warning("Could not list previous profile images in %s", folder, exc_info=True)
            return
        for filename in files:
            try:
                self.storage.delete(f"{folder}/{filename}")
            except OSError:
                logger.warning("Could not delete previous profile image %s/%s", folder, filename, exc_info=True)

    def replace_image(self, upload) -> str:
        """Store ``upload`` as the user's profile picture and return its URL."""

        extension = os.path.splitext(upload.name)[1].lstrip(".").lower() or "jpg"
        self._remove_previous_images()
        with self._remote_call("upload profile image"):
            saved_name = self.storage.save(f"{self._image_folder()}/profile.{extension}", upload)
            image_url = self.storage.url(saved_name)
            Profile.objects.filter(user=self.user).update(image_url=image_url, updated_at=timezone.now())
        return image_url

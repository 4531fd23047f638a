"""
location_store.py
-----------------
Reads and writes the location collection kept as ONE record in the
settings store (configmgr option, default key "local_seo_schema_locations").

Stored shape (JSON object, insertion order = display/output order):
    {"loc_1700000000123": {"name": "...", "street_address": "...", ...}, ...}

Writes go through LocationSerializer; an invalid entry aborts the whole
write and nothing is stored.
"""

import logging
import random
import re
import time

from django.db import transaction
from rest_framework import serializers

from configmgr.options import delete_option, get_option, update_option

from ..conf import get_setting
from ..records import LocationRecord
from ..serializers import LocationSerializer

logger = logging.getLogger(__name__)

LOCATION_ID_RE = re.compile(r"[^a-z0-9_\-]")


def sanitize_location_id(location_id) -> str:
    """Lowercase; keep only a-z, 0-9, '_' and '-'."""
    return LOCATION_ID_RE.sub("", str(location_id or "").lower())


class LocationStore:
    def __init__(self, option_name: str | None = None):
        self.option_name = option_name or get_setting("OPTION_NAME")

    # -------------------- reads --------------------
    def raw(self) -> dict:
        data = get_option(self.option_name, {})
        if not isinstance(data, dict):
            logger.warning(
                "Option %r is %s, expected an object; treating as empty",
                self.option_name,
                type(data).__name__,
            )
            return {}
        return data

    def all(self) -> dict:
        """Ordered mapping of location id -> LocationRecord."""
        return {
            location_id: LocationRecord.from_dict(location_id, data)
            for location_id, data in self.raw().items()
        }

    def get(self, location_id):
        data = self.raw().get(location_id)
        if data is None:
            return None
        return LocationRecord.from_dict(location_id, data)

    # -------------------- writes --------------------
    def validate(self, raw_collection) -> dict:
        """
        Sanitize a whole collection without saving it.

        Raises:
            serializers.ValidationError: keyed by location id.
        """
        if not isinstance(raw_collection, dict):
            raise serializers.ValidationError(
                {"non_field_errors": ["Expected an object of location id -> location."]}
            )

        cleaned = {}
        errors = {}
        for raw_id, raw_location in raw_collection.items():
            location_id = sanitize_location_id(raw_id)
            if not location_id:
                errors[str(raw_id)] = ["Location id must contain letters, digits, '_' or '-'."]
                continue
            if location_id in cleaned:
                errors[str(raw_id)] = [f"Duplicate location id {location_id!r}."]
                continue
            serializer = LocationSerializer(data=raw_location)
            if not serializer.is_valid():
                errors[location_id] = serializer.errors
                continue
            cleaned[location_id] = LocationRecord.from_dict(location_id, serializer.validated_data).to_dict()

        if errors:
            raise serializers.ValidationError(errors)
        return cleaned

    @transaction.atomic
    def replace_all(self, raw_collection) -> dict:
        cleaned = self.validate(raw_collection)
        update_option(self.option_name, cleaned)
        logger.info("Saved %d location(s)", len(cleaned))
        return {
            location_id: LocationRecord.from_dict(location_id, data)
            for location_id, data in cleaned.items()
        }

    @transaction.atomic
    def save(self, location_id, raw_location) -> LocationRecord:
        """Insert or update one location; existing ids keep their position."""
        location_id = sanitize_location_id(location_id)
        cleaned = self.validate({location_id: raw_location})
        collection = self.raw()
        collection[location_id] = cleaned[location_id]
        update_option(self.option_name, collection)
        return LocationRecord.from_dict(location_id, cleaned[location_id])

    @transaction.atomic
    def delete(self, location_id) -> bool:
        collection = self.raw()
        if location_id not in collection:
            return False
        del collection[location_id]
        update_option(self.option_name, collection)
        return True

    def clear(self) -> bool:
        return delete_option(self.option_name)

    @staticmethod
    def new_location_id() -> str:
        return f"loc_{int(time.time() * 1000)}{random.randint(0, 999)}"

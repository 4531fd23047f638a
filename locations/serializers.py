# locations/serializers.py
#
# Purpose:
# - Sanitize raw location input (staff form, JSON API) before it reaches the
#   settings store. Output is the stored JSON shape of LocationRecord.to_dict().
#
# Notes:
# - Unknown keys are ignored (DRF Serializer only reads declared fields).
# - Name/address are NOT required here: incomplete drafts may be saved and the
#   schema builder simply skips them until they are complete.
#
from rest_framework import serializers

from .constants import BUSINESS_TYPES, DAY_KEYS
from .records import Reservations, split_list


class CommaSeparatedListField(serializers.Field):
    """
    Accepts ["a", "b"] or "a, b" and returns a list of trimmed, non-empty strings.
    """
    default_error_messages = {
        "invalid": "Expected a list of strings or a comma-separated string.",
    }

    def to_internal_value(self, data):
        if data is None or data == "":
            return []
        if not isinstance(data, (str, list, tuple)):
            self.fail("invalid")
        return split_list(data)

    def to_representation(self, value):
        return list(value or [])


class ReservationField(serializers.Field):
    """
    "", None -> null; "True"/true -> true; "False"/false -> false.
    """
    default_error_messages = {
        "invalid": 'Expected "", "True", "False" or a boolean.',
    }

    def to_internal_value(self, data):
        if isinstance(data, str) and data.strip() not in ("", "True", "False"):
            self.fail("invalid")
        if data is not None and not isinstance(data, (str, bool)):
            self.fail("invalid")
        return Reservations.from_value(data).as_bool()

    def to_representation(self, value):
        return Reservations.from_value(value).as_bool()


class OpeningHoursField(serializers.DictField):
    """
    Day-key -> raw hours text. Unknown day-keys are dropped; values trimmed.
    The text itself is not validated: the schema builder drops bad ranges.
    """
    child = serializers.CharField(allow_blank=True, required=False, max_length=200)

    def to_internal_value(self, data):
        if isinstance(data, dict):
            data = {key: ("" if value is None else value) for key, value in data.items() if key in DAY_KEYS}
        value = super().to_internal_value(data)
        return {key: value[key] for key in DAY_KEYS if key in value}


class LocationSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, required=False, default="", max_length=200)
    business_type = serializers.CharField(allow_blank=True, required=False, default="", max_length=100)
    street_address = serializers.CharField(allow_blank=True, required=False, default="", max_length=200)
    locality = serializers.CharField(allow_blank=True, required=False, default="", max_length=100)
    region = serializers.CharField(allow_blank=True, required=False, default="", max_length=100)
    postal_code = serializers.CharField(allow_blank=True, required=False, default="", max_length=20)
    country = serializers.CharField(allow_blank=True, required=False, default="", max_length=100)
    telephone = serializers.CharField(allow_blank=True, required=False, default="", max_length=50)
    url = serializers.URLField(allow_blank=True, required=False, default="")
    image = serializers.URLField(allow_blank=True, required=False, default="")
    price_range = serializers.CharField(allow_blank=True, required=False, default="", max_length=50)
    map_url = serializers.URLField(allow_blank=True, required=False, default="")
    menu_url = serializers.URLField(allow_blank=True, required=False, default="")
    latitude = serializers.FloatField(allow_null=True, required=False, default=None, min_value=-90, max_value=90)
    longitude = serializers.FloatField(allow_null=True, required=False, default=None, min_value=-180, max_value=180)
    opening_hours = OpeningHoursField(required=False, default=dict)
    area_served = CommaSeparatedListField(required=False, default=list)
    serves_cuisine = CommaSeparatedListField(required=False, default=list)
    accepts_reservations = ReservationField(required=False, default=None, allow_null=True)

    def to_internal_value(self, data):
        # Blank coordinates from HTML forms mean "not set".
        if isinstance(data, dict):
            data = data.copy()
            for key in ("latitude", "longitude"):
                if isinstance(data.get(key), str) and not data[key].strip():
                    data[key] = None
        return super().to_internal_value(data)

    def validate_business_type(self, value):
        if value and value not in BUSINESS_TYPES:
            raise serializers.ValidationError(f'"{value}" is not a supported business type.')
        return value

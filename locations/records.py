# locations/records.py
#
# Purpose:
# - Typed view of one stored business location.
#
# Design highlights:
# - LocationRecord.from_dict() reads the stored JSON shape and ignores any
#   key it does not know. It never raises: bad coordinates become None,
#   unknown day-keys are dropped, a comma-separated string given for a list
#   field is split.
# - Reservations is a tri-state (unset / accepts / declines). The staff form
#   posts the legacy "True"/"False" strings; stored JSON uses true/false/null.
#

import math
from dataclasses import dataclass, field
from enum import Enum

from .constants import DAY_KEYS, FOOD_BUSINESS_TYPES, REQUIRED_FIELDS


class Reservations(Enum):
    UNSET = "unset"
    ACCEPTS = "accepts"
    DECLINES = "declines"

    @classmethod
    def from_value(cls, value):
        """
        Map form/API/stored input onto the tri-state.

        - None or "" -> UNSET
        - bool -> ACCEPTS / DECLINES
        - the form sentinel "False" -> DECLINES
        - any other non-empty value -> ACCEPTS
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNSET
        if isinstance(value, bool):
            return cls.ACCEPTS if value else cls.DECLINES
        text = str(value).strip()
        if not text:
            return cls.UNSET
        if text == "False":
            return cls.DECLINES
        return cls.ACCEPTS

    def as_bool(self):
        if self is Reservations.UNSET:
            return None
        return self is Reservations.ACCEPTS

    def as_legacy_string(self):
        if self is Reservations.UNSET:
            return ""
        return "True" if self is Reservations.ACCEPTS else "False"


def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _coordinate(value):
    """Return a finite float, or None when the value is blank or not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def split_list(value) -> list:
    """
    Normalize a list-ish field into a list of trimmed strings.

    A single string is split on commas (what the staff form posts).
    A list/tuple is taken entry by entry; an entry may contain commas
    ("Paris, France" stays one place). Empty entries are kept out.
    """
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        return []

    result = []
    for item in items:
        if item is None:
            continue
        item = str(item).strip()
        if item:
            result.append(item)
    return result


def _opening_hours(value) -> dict:
    if not isinstance(value, dict):
        return {}
    return {key: _text(value.get(key)) for key in DAY_KEYS if key in value}


@dataclass(frozen=True)
class LocationRecord:
    id: str
    name: str = ""
    business_type: str = ""
    street_address: str = ""
    locality: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""
    telephone: str = ""
    url: str = ""
    image: str = ""
    price_range: str = ""
    map_url: str = ""
    menu_url: str = ""
    latitude: float | None = None
    longitude: float | None = None
    opening_hours: dict = field(default_factory=dict)
    area_served: list = field(default_factory=list)
    serves_cuisine: list = field(default_factory=list)
    accepts_reservations: Reservations = Reservations.UNSET

    TEXT_FIELDS = (
        "name",
        "business_type",
        "street_address",
        "locality",
        "region",
        "postal_code",
        "country",
        "telephone",
        "url",
        "image",
        "price_range",
        "map_url",
        "menu_url",
    )

    @classmethod
    def from_dict(cls, location_id, data):
        if not isinstance(data, dict):
            data = {}
        kwargs = {name: _text(data.get(name)) for name in cls.TEXT_FIELDS}
        return cls(
            id=str(location_id),
            latitude=_coordinate(data.get("latitude")),
            longitude=_coordinate(data.get("longitude")),
            opening_hours=_opening_hours(data.get("opening_hours")),
            area_served=split_list(data.get("area_served")),
            serves_cuisine=split_list(data.get("serves_cuisine")),
            accepts_reservations=Reservations.from_value(data.get("accepts_reservations")),
            **kwargs,
        )

    def to_dict(self) -> dict:
        """JSON-serializable shape used by the settings store (no id)."""
        data = {name: getattr(self, name) for name in self.TEXT_FIELDS}
        data.update({
            "latitude": self.latitude,
            "longitude": self.longitude,
            "opening_hours": dict(self.opening_hours),
            "area_served": list(self.area_served),
            "serves_cuisine": list(self.serves_cuisine),
            "accepts_reservations": self.accepts_reservations.as_bool(),
        })
        return data

    @property
    def missing_required_fields(self):
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_required_fields

    @property
    def is_food_establishment(self) -> bool:
        return self.business_type in FOOD_BUSINESS_TYPES

    @property
    def has_geo(self) -> bool:
        return self.latitude is not None and self.longitude is not None

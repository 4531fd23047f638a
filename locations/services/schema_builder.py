"""
schema_builder.py
-----------------
Turns the stored location collection into schema.org LocalBusiness JSON-LD
documents (plain dicts, ready for json.dumps).

Rules:
- A location is skipped when name or any address part is empty.
- Optional properties are added only when their source field is non-empty.
- Opening hours are parsed per day, then grouped by identical (opens, closes)
  pairs so "Mon-Fri 09:00-17:00" becomes one OpeningHoursSpecification.
- Food-only properties (servesCuisine, acceptsReservations, menu) are added
  only for FOOD_BUSINESS_TYPES.

The builder does no I/O and keeps no state between calls; malformed input is
dropped, never raised.
"""

import logging
import re

from ..constants import (
    CLOSED_KEYWORD,
    CLOSED_TIME,
    DAY_KEYS,
    DAY_NAMES,
    DEFAULT_BUSINESS_TYPE,
    SCHEMA_CONTEXT,
)
from ..records import LocationRecord, Reservations

logger = logging.getLogger(__name__)

TIME_RANGE_RE = re.compile(r"([0-9]{2}:[0-9]{2})-([0-9]{2}:[0-9]{2})")


def day_of_week_url(day_key: str) -> str:
    """'Mo' -> 'https://schema.org/Monday'; unknown keys -> ''."""
    day_name = DAY_NAMES.get(day_key)
    if not day_name:
        return ""
    return f"{SCHEMA_CONTEXT}/{day_name}"


def parse_day_hours(day_key: str, raw_value) -> list:
    """
    Parse one day's raw text into (day_url, opens, closes) tuples.

    "closed" (any case) -> one tuple with 00:00/00:00.
    Otherwise every comma-separated HH:MM-HH:MM range is kept in order and
    anything else is dropped.
    """
    value = (raw_value or "").strip()
    if not value:
        return []

    day_url = day_of_week_url(day_key)
    if value.lower() == CLOSED_KEYWORD:
        return [(day_url, CLOSED_TIME, CLOSED_TIME)]

    specs = []
    for candidate in value.split(","):
        match = TIME_RANGE_RE.fullmatch(candidate.strip())
        if match:
            specs.append((day_url, match.group(1), match.group(2)))
    return specs


def collect_opening_specs(opening_hours: dict) -> list:
    """Flat list of tuples for all seven days, Monday first."""
    specs = []
    for day_key in DAY_KEYS:
        specs.extend(parse_day_hours(day_key, opening_hours.get(day_key)))
    return specs


def group_opening_specs(specs) -> list:
    """
    Merge tuples sharing the same (opens, closes) pair.

    Groups keep first-seen order and each group's days keep first-seen
    order without duplicates.
    """
    groups = {}
    for day_url, opens, closes in specs:
        group = groups.get((opens, closes))
        if group is None:
            group = {
                "@type": "OpeningHoursSpecification",
                "dayOfWeek": [],
                "opens": opens,
                "closes": closes,
            }
            groups[(opens, closes)] = group
        if day_url not in group["dayOfWeek"]:
            group["dayOfWeek"].append(day_url)
    return list(groups.values())


def opening_hours_specification(opening_hours: dict) -> list:
    return group_opening_specs(collect_opening_specs(opening_hours or {}))


class SchemaBuilder:
    """
    Builds one JSON-LD dict per eligible location.

    Args:
        site_url: fallback for "url" when a location has none (may be "").
        legacy_reservation_strings: emit acceptsReservations as "True"/"False"
            strings instead of JSON booleans.
    """

    def __init__(self, site_url: str = "", legacy_reservation_strings: bool = False):
        self.site_url = site_url or ""
        self.legacy_reservation_strings = legacy_reservation_strings

    def build(self, locations):
        """
        Yield schema dicts in collection order.

        Args:
            locations: mapping of location id -> LocationRecord or raw dict
        """
        for location_id, location in (locations or {}).items():
            if not isinstance(location, LocationRecord):
                location = LocationRecord.from_dict(location_id, location)
            if not location.is_complete:
                logger.debug(
                    "Skipping location %s: missing %s",
                    location_id,
                    ", ".join(location.missing_required_fields),
                )
                continue
            yield self.build_location(location)

    def build_location(self, location: LocationRecord) -> dict:
        schema = {
            "@context": SCHEMA_CONTEXT,
            "@type": location.business_type or DEFAULT_BUSINESS_TYPE,
            "name": location.name,
            "address": {
                "@type": "PostalAddress",
                "streetAddress": location.street_address,
                "addressLocality": location.locality,
                "addressRegion": location.region,
                "postalCode": location.postal_code,
                "addressCountry": location.country,
            },
        }

        if location.telephone:
            schema["telephone"] = location.telephone

        url = location.url or self.site_url
        if url:
            schema["url"] = url

        if location.image:
            schema["image"] = location.image
        if location.price_range:
            schema["priceRange"] = location.price_range

        if location.has_geo:
            schema["geo"] = {
                "@type": "GeoCoordinates",
                "latitude": float(location.latitude),
                "longitude": float(location.longitude),
            }

        opening_specs = opening_hours_specification(location.opening_hours)
        if opening_specs:
            schema["openingHoursSpecification"] = opening_specs

        areas = [{"@type": "Place", "name": area} for area in location.area_served if area]
        if areas:
            schema["areaServed"] = areas

        if location.map_url:
            schema["hasMap"] = location.map_url

        if location.is_food_establishment:
            self._add_food_properties(schema, location)

        return schema

    def _add_food_properties(self, schema: dict, location: LocationRecord):
        cuisines = [cuisine for cuisine in location.serves_cuisine if cuisine]
        if cuisines:
            schema["servesCuisine"] = cuisines

        if location.accepts_reservations is not Reservations.UNSET:
            if self.legacy_reservation_strings:
                schema["acceptsReservations"] = location.accepts_reservations.as_legacy_string()
            else:
                schema["acceptsReservations"] = location.accepts_reservations.as_bool()

        if location.menu_url:
            schema["menu"] = location.menu_url

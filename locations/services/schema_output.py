"""
schema_output.py
----------------
Wires the pieces for one rendering pass:

    LocationStore (settings read) -> SchemaBuilder -> JSON-LD script blocks

Nothing is cached between calls, so edits show up on the next render.
"""

from ..conf import get_setting, get_site_url
from .jsonld import to_script_tags
from .location_store import LocationStore
from .schema_builder import SchemaBuilder


def get_schema_builder(request=None, site_url=None) -> SchemaBuilder:
    if site_url is None:
        site_url = get_site_url(request)
    return SchemaBuilder(
        site_url=site_url,
        legacy_reservation_strings=bool(get_setting("LEGACY_RESERVATION_STRINGS")),
    )


def location_schemas(request=None, site_url=None, store=None) -> list:
    """JSON-LD dicts for every eligible stored location, in stored order."""
    store = store or LocationStore()
    builder = get_schema_builder(request=request, site_url=site_url)
    return list(builder.build(store.all()))


def location_schema_tags(request=None, site_url=None, store=None) -> str:
    """Safe HTML: one <script type="application/ld+json"> per eligible location."""
    return to_script_tags(location_schemas(request=request, site_url=site_url, store=store))

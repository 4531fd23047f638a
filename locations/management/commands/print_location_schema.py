"""
print_location_schema.py
------------------------
Print the LocalBusiness JSON-LD for every eligible stored location, exactly
as it is embedded in pages.

Usage:
    python manage.py print_location_schema
    python manage.py print_location_schema --site-url https://example.com --raw

Behavior:
- Locations missing a name or address part are skipped (counted in the summary).
- --raw prints bare JSON documents instead of <script> blocks.
"""

from django.core.management.base import BaseCommand

from locations.services.jsonld import to_json_ld, to_script_tag
from locations.services.location_store import LocationStore
from locations.services.schema_output import get_schema_builder


class Command(BaseCommand):
    help = "Print the JSON-LD LocalBusiness schema for the stored locations."

    def add_arguments(self, parser):
        parser.add_argument(
            "--site-url",
            default=None,
            help="Fallback URL for locations without their own (defaults to LOCAL_SEO_SCHEMA['SITE_URL']).",
        )
        parser.add_argument(
            "--raw",
            action="store_true",
            help="Print bare JSON documents instead of <script> blocks.",
        )

    def handle(self, *args, **options):
        locations = LocationStore().all()
        builder = get_schema_builder(site_url=options["site_url"])

        printed = 0
        for schema in builder.build(locations):
            self.stdout.write(to_json_ld(schema) if options["raw"] else to_script_tag(schema))
            printed += 1

        skipped = len(locations) - printed
        self.stdout.write(self.style.SUCCESS(f"Printed {printed} schema(s), skipped {skipped} incomplete location(s)."))

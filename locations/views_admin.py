# locations/views_admin.py
#
# Purpose:
# - Staff-only page at /admin/local-seo/ to add, edit and remove business
#   locations, with a live preview of the JSON-LD each one produces.
#
# Template:
# - locations/templates/manage_locations.html (flat, no "locations/" subfolder)
#
# Behavior:
# - GET renders one form per stored location plus one blank form.
# - POST validates the formset, then replaces the stored collection.
#   Sanitizer errors from the store are shown as a page message.
#
import logging

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods
from rest_framework import serializers

from .constants import FOOD_BUSINESS_TYPES
from .forms import HOURS_HELP, LocationForm, LocationFormSet
from .services.jsonld import to_json_ld
from .services.location_store import LocationStore
from .services.schema_output import location_schemas

logger = logging.getLogger(__name__)


def _error_summary(detail) -> str:
    parts = []
    for location_id, errors in detail.items():
        if isinstance(errors, dict):
            fields = ", ".join(f"{name}: {' '.join(str(e) for e in msgs)}" for name, msgs in errors.items())
        else:
            fields = " ".join(str(e) for e in errors)
        parts.append(f"{location_id} ({fields})")
    return "Locations were not saved. " + "; ".join(parts)


@staff_member_required
@require_http_methods(["GET", "POST"])
def manage_locations(request):
    store = LocationStore()

    if request.method == "POST":
        formset = LocationFormSet(request.POST)
        if formset.is_valid():
            try:
                saved = store.replace_all(formset.to_collection())
            except serializers.ValidationError as e:
                logger.info("Rejected location update from %s", request.user)
                messages.error(request, _error_summary(e.detail))
            else:
                messages.success(request, f"Saved {len(saved)} location(s).")
                return redirect("manage_locations")
    else:
        formset = LocationFormSet(
            initial=[LocationForm.initial_from_record(record) for record in store.all().values()]
        )

    ctx = {
        "formset": formset,
        "food_business_types": sorted(FOOD_BUSINESS_TYPES),
        "hours_help": HOURS_HELP,
        "schema_preview": [to_json_ld(schema) for schema in location_schemas(request=request, store=store)],
    }
    return render(request, "manage_locations.html", ctx)

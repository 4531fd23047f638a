# locations/forms.py
#
# Purpose:
# - HTML form for one business location, and a formset for the whole list,
#   used by the staff page at /admin/local-seo/.
#
# Design highlights:
# - One text input per day, generated from DAYS_OF_WEEK (field names hours_Mo..hours_Su).
# - Area served / cuisines are single comma-separated inputs.
# - The formset turns valid forms back into the raw collection that
#   LocationStore.replace_all() sanitizes and stores.
# - Blank extra forms are ignored; ticked "delete" boxes drop the location.
# - Name and address are required for new locations only, so drafts stored
#   through the API do not block saving the page.
#
from django import forms

from .constants import BUSINESS_TYPE_CHOICES, DAYS_OF_WEEK, DEFAULT_BUSINESS_TYPE, REQUIRED_FIELDS, RESERVATION_CHOICES
from .services.location_store import LocationStore

HOURS_HELP = (
    'Enter opening hours in HH:MM-HH:MM format (e.g., 09:00-17:00). Use "closed" if applicable. '
    "For multiple ranges on a single day, separate with commas (e.g., 09:00-12:00, 13:00-17:00)."
)


def hours_field_name(day_key: str) -> str:
    return f"hours_{day_key}"


class LocationForm(forms.Form):
    location_id = forms.CharField(required=False, widget=forms.HiddenInput)
    name = forms.CharField(max_length=200, required=False, help_text="The official name of your business location.")
    business_type = forms.ChoiceField(
        choices=BUSINESS_TYPE_CHOICES,
        required=False,
        initial=DEFAULT_BUSINESS_TYPE,
        help_text="Choose the most specific type for your business from Schema.org.",
        widget=forms.Select(attrs={"class": "lss-business-type"}),
    )
    street_address = forms.CharField(max_length=200, required=False)
    locality = forms.CharField(max_length=100, required=False, label="City / Locality")
    region = forms.CharField(max_length=100, required=False, label="State / Region")
    postal_code = forms.CharField(max_length=20, required=False)
    country = forms.CharField(max_length=100, required=False, help_text="e.g., US")
    telephone = forms.CharField(max_length=50, required=False, help_text="e.g., +1-555-123-4567")
    url = forms.URLField(required=False, assume_scheme="https", label="Website URL", help_text="The official URL of this business location.")
    image = forms.URLField(required=False, assume_scheme="https", label="Image URL", help_text="A URL to a photo of the business (e.g., logo or storefront).")
    price_range = forms.CharField(max_length=50, required=False, help_text="e.g., $, $$, $$$, $$$$.")
    latitude = forms.FloatField(required=False, min_value=-90, max_value=90)
    longitude = forms.FloatField(required=False, min_value=-180, max_value=180)
    area_served = forms.CharField(
        required=False,
        help_text='Comma-separated list of areas served (e.g., "New York City", "Brooklyn").',
    )
    map_url = forms.URLField(required=False, assume_scheme="https", label="Map URL", help_text="A URL to a map of the business location (e.g., Google Maps link).")
    serves_cuisine = forms.CharField(
        required=False,
        help_text='Comma-separated list of cuisines served (e.g., "Italian", "Mexican").',
    )
    accepts_reservations = forms.ChoiceField(choices=RESERVATION_CHOICES, required=False)
    menu_url = forms.URLField(required=False, assume_scheme="https", label="Menu URL")

    FOOD_FIELDS = ("serves_cuisine", "accepts_reservations", "menu_url")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for day_key, day_name in DAYS_OF_WEEK:
            self.fields[hours_field_name(day_key)] = forms.CharField(
                label=day_name,
                required=False,
                max_length=200,
                widget=forms.TextInput(attrs={"placeholder": "e.g., 09:00-17:00 or closed"}),
            )

    @property
    def day_fields(self):
        return [self[hours_field_name(day_key)] for day_key, _ in DAYS_OF_WEEK]

    @property
    def food_fields(self):
        return [self[name] for name in self.FOOD_FIELDS]

    @property
    def general_fields(self):
        skip = set(self.FOOD_FIELDS) | {"location_id", "DELETE"}
        skip.update(hours_field_name(day_key) for day_key, _ in DAYS_OF_WEEK)
        return [field for field in self.visible_fields() if field.name not in skip]

    def clean(self):
        """
        New locations need a name and a full address. Stored ones may stay
        incomplete (drafts); the schema builder skips them until filled in.
        """
        cleaned_data = super().clean()
        if not cleaned_data.get("location_id"):
            for name in REQUIRED_FIELDS:
                if not cleaned_data.get(name) and name not in self.errors:
                    message = self.fields[name].error_messages["required"]
                    self.add_error(name, forms.ValidationError(message, code="required"))
        return cleaned_data

    @staticmethod
    def initial_from_record(record) -> dict:
        """Initial form values for a stored LocationRecord."""
        initial = {
            "location_id": record.id,
            "name": record.name,
            "business_type": record.business_type or DEFAULT_BUSINESS_TYPE,
            "street_address": record.street_address,
            "locality": record.locality,
            "region": record.region,
            "postal_code": record.postal_code,
            "country": record.country,
            "telephone": record.telephone,
            "url": record.url,
            "image": record.image,
            "price_range": record.price_range,
            "latitude": record.latitude,
            "longitude": record.longitude,
            "area_served": ", ".join(record.area_served),
            "map_url": record.map_url,
            "serves_cuisine": ", ".join(record.serves_cuisine),
            "accepts_reservations": record.accepts_reservations.as_legacy_string(),
            "menu_url": record.menu_url,
        }
        for day_key, _ in DAYS_OF_WEEK:
            initial[hours_field_name(day_key)] = record.opening_hours.get(day_key, "")
        return initial

    def to_location_data(self) -> dict:
        """Raw location dict (stored field names) from cleaned_data."""
        data = self.cleaned_data
        location = {
            name: data.get(name)
            for name in (
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
                "latitude",
                "longitude",
                "area_served",
                "map_url",
                "serves_cuisine",
                "accepts_reservations",
                "menu_url",
            )
        }
        location["opening_hours"] = {
            day_key: data.get(hours_field_name(day_key)) or ""
            for day_key, _ in DAYS_OF_WEEK
        }
        return location


class BaseLocationFormSet(forms.BaseFormSet):
    def to_collection(self) -> dict:
        """
        Ordered {location_id: raw location} for every kept form.
        Call only after is_valid().
        """
        collection = {}
        for form in self.forms:
            if self.can_delete and self._should_delete_form(form):
                continue
            if not form.has_changed() and not form.cleaned_data.get("location_id"):
                continue
            location_id = form.cleaned_data.get("location_id") or LocationStore.new_location_id()
            collection[location_id] = form.to_location_data()
        return collection


LocationFormSet = forms.formset_factory(
    LocationForm,
    formset=BaseLocationFormSet,
    extra=1,
    can_delete=True,
)

# locations/apps.py
from django.apps import AppConfig

class LocationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "locations"
    verbose_name = "Local SEO locations"

# locations/conf.py
#
# App settings, read from settings.LOCAL_SEO_SCHEMA with defaults:
#   OPTION_NAME                 settings-store key holding the location collection
#   SITE_URL                    fallback "url" for locations without one
#   LEGACY_RESERVATION_STRINGS  emit acceptsReservations as "True"/"False"
#

from django.conf import settings

DEFAULTS = {
    "OPTION_NAME": "local_seo_schema_locations",
    "SITE_URL": "",
    "LEGACY_RESERVATION_STRINGS": False,
}


def get_setting(name):
    user_settings = getattr(settings, "LOCAL_SEO_SCHEMA", None) or {}
    return user_settings.get(name, DEFAULTS[name])


def get_site_url(request=None) -> str:
    """
    Site-wide base URL used when a location has no URL of its own.
    Configured SITE_URL wins; otherwise the request's root URL.
    """
    site_url = (get_setting("SITE_URL") or "").strip()
    if site_url:
        return site_url.rstrip("/")
    if request is not None:
        return request.build_absolute_uri("/").rstrip("/")
    return ""

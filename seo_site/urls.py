# seo_site/urls.py
#
# Purpose:
# - Project URL router.
# - Keeps the JSON API under /api/ and the staff locations page next to the
#   Django admin.
#
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

from locations.views_admin import manage_locations
from locations.views_pages import HomePage


urlpatterns = [
    # ================
    # Staff-only pages
    # ================
    # Must come before "admin/" so the admin catch-all does not shadow it.
    path("admin/local-seo/", manage_locations, name="manage_locations"),

    # Django admin
    path("admin/", admin.site.urls),

    # =====
    # API's
    # =====
    path("api/", include("locations.urls")),

    # ==========
    # Public HTML
    # ==========
    path("", HomePage.as_view(), name="home"),
]

# Static files in DEBUG (dev only). In production, serve via web server / CDN.
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

# locations/urls.py
#
# JSON API routes, mounted under /api/ by seo_site/urls.py.
#
from django.urls import path

from .views import LocationCollectionView, LocationSchemaView

urlpatterns = [
    path("locations/", LocationCollectionView.as_view(), name="location_collection"),
    path("locations/schema/", LocationSchemaView.as_view(), name="location_schema"),
]

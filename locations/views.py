# locations/views.py
#
# Purpose:
# - JSON API for the location collection and its JSON-LD output.
#   * GET /api/locations/          (staff)  stored collection
#   * PUT /api/locations/          (staff)  replace the whole collection
#   * GET /api/locations/schema/   (public) JSON-LD documents, one per eligible location
#
# Notes:
# - Invalid input on PUT raises serializers.ValidationError inside the store;
#   DRF turns it into a 400 response keyed by location id.
#
from rest_framework.permissions import AllowAny, BasePermission
from rest_framework.response import Response
from rest_framework.views import APIView

from .services.location_store import LocationStore
from .services.schema_output import location_schemas


class IsStaffOnly(BasePermission):
    """
    Only allow requests from logged-in staff users.
    """
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_staff)


class LocationCollectionView(APIView):
    permission_classes = [IsStaffOnly]

    def get(self, request):
        records = LocationStore().all()
        return Response({location_id: record.to_dict() for location_id, record in records.items()})

    def put(self, request):
        records = LocationStore().replace_all(request.data)
        return Response({location_id: record.to_dict() for location_id, record in records.items()})


class LocationSchemaView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(location_schemas(request=request))

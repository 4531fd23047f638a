# locations/templatetags/local_seo.py
#
# Usage (inside <head>):
#   {% load local_seo %}
#   {% local_business_schema %}
#
from django import template

from ..services.schema_output import location_schema_tags

register = template.Library()


@register.simple_tag(takes_context=True)
def local_business_schema(context):
    """Render one JSON-LD <script> block per eligible location."""
    return location_schema_tags(request=context.get("request"))

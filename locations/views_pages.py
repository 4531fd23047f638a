# locations/views_pages.py
from django.views.generic import TemplateView


class HomePage(TemplateView):
    """
    Public landing page. Its <head> carries the LocalBusiness JSON-LD
    via {% local_business_schema %}.
    Template: templates/home.html
    """
    template_name = "home.html"

# locations/tests/test_views.py

from django.contrib.auth.models import User
from django.template import Context, Template
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from locations.records import Reservations
from locations.services.location_store import LocationStore


def location(name, **extra):
    data = {
        "name": name,
        "business_type": "Restaurant",
        "street_address": "1 Main St",
        "locality": "Springfield",
        "region": "IL",
        "postal_code": "62701",
        "country": "US",
    }
    data.update(extra)
    return data


class LocationApiTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.staff = User.objects.create_user(username="admin", password="testpass123", is_staff=True)
        self.store = LocationStore()

    def test_collection_requires_staff(self):
        resp = self.client.get("/api/locations/")
        self.assertIn(resp.status_code, (401, 403))

        user = User.objects.create_user(username="visitor", password="testpass123")
        self.client.force_authenticate(user=user)
        resp = self.client.put("/api/locations/", data={}, format="json")
        self.assertEqual(resp.status_code, 403)

    def test_staff_can_read_collection(self):
        self.store.replace_all({"loc_1": location("A")})
        self.client.force_authenticate(user=self.staff)

        resp = self.client.get("/api/locations/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["loc_1"]["name"], "A")

    def test_staff_can_replace_collection(self):
        self.client.force_authenticate(user=self.staff)
        resp = self.client.put(
            "/api/locations/",
            data={"loc_2": location("B", accepts_reservations="True"), "loc_1": location("A")},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(list(resp.json()), ["loc_2", "loc_1"])
        self.assertIs(self.store.get("loc_2").accepts_reservations, Reservations.ACCEPTS)

    def test_invalid_replace_returns_400(self):
        self.store.replace_all({"loc_1": location("Original")})
        self.client.force_authenticate(user=self.staff)

        resp = self.client.put(
            "/api/locations/",
            data={"loc_1": location("Changed", latitude="north")},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("latitude", resp.json()["loc_1"])
        self.assertEqual(self.store.get("loc_1").name, "Original")

    @override_settings(LOCAL_SEO_SCHEMA={"SITE_URL": "https://example.com/"})
    def test_public_schema_endpoint(self):
        self.store.replace_all({
            "loc_1": location("A", opening_hours={"Mo": "09:00-17:00", "Tu": "09:00-17:00"}),
            "loc_2": location(""),
        })

        resp = self.client.get("/api/locations/schema/")
        self.assertEqual(resp.status_code, 200)
        documents = resp.json()
        self.assertEqual(len(documents), 1)
        self.assertEqual(documents[0]["@type"], "Restaurant")
        self.assertEqual(documents[0]["url"], "https://example.com")
        self.assertEqual(
            documents[0]["openingHoursSpecification"][0]["dayOfWeek"],
            ["https://schema.org/Monday", "https://schema.org/Tuesday"],
        )

    def test_schema_url_falls_back_to_request_root(self):
        self.store.replace_all({"loc_1": location("A")})
        resp = self.client.get("/api/locations/schema/")
        self.assertEqual(resp.json()[0]["url"], "http://testserver")


class SchemaRenderingTests(TestCase):

    def setUp(self):
        LocationStore().replace_all({
            "loc_1": location("First"),
            "loc_2": location("Second", business_type="BookStore", serves_cuisine="Italian"),
            "loc_3": location("Incomplete", country=""),
        })

    def test_home_page_embeds_one_block_per_eligible_location(self):
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        html = resp.content.decode()
        self.assertEqual(html.count('<script type="application/ld+json">'), 2)
        self.assertIn('"name": "First"', html)
        self.assertIn('"name": "Second"', html)
        self.assertNotIn("Incomplete", html)
        self.assertNotIn("servesCuisine", html)

    def test_template_tag_without_request(self):
        html = Template("{% load local_seo %}{% local_business_schema %}").render(Context({}))
        self.assertEqual(html.count("</script>"), 2)
        self.assertIn('"@context": "https://schema.org"', html)

    def test_renders_are_identical(self):
        first = self.client.get("/").content
        second = self.client.get("/").content
        self.assertEqual(first, second)


class ManageLocationsPageTests(TestCase):

    def setUp(self):
        self.staff = User.objects.create_user(username="admin", password="testpass123", is_staff=True)
        self.store = LocationStore()

    def management_form(self, total, initial):
        return {
            "form-TOTAL_FORMS": str(total),
            "form-INITIAL_FORMS": str(initial),
            "form-MIN_NUM_FORMS": "0",
            "form-MAX_NUM_FORMS": "1000",
        }

    def form_fields(self, index, **values):
        return {f"form-{index}-{name}": value for name, value in values.items()}

    def test_requires_staff_login(self):
        resp = self.client.get("/admin/local-seo/")
        self.assertEqual(resp.status_code, 302)
        self.assertIn("/admin/login/", resp["Location"])

    def test_get_lists_stored_locations(self):
        self.store.replace_all({"loc_1": location("Joe's Diner")})
        self.client.force_login(self.staff)

        resp = self.client.get("/admin/local-seo/")
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "Joe&#x27;s Diner")
        self.assertContains(resp, 'id="lss-food-types"')
        self.assertContains(resp, "CafeOrCoffeeShop")
        self.assertEqual(resp.context["formset"].total_form_count(), 2)
        self.assertEqual(len(resp.context["schema_preview"]), 1)

    def test_post_creates_location(self):
        self.client.force_login(self.staff)
        data = self.management_form(total=2, initial=0)
        data.update(self.form_fields(
            0,
            location_id="",
            name="Joe's Diner",
            business_type="Restaurant",
            street_address="1 Main St",
            locality="Springfield",
            region="IL",
            postal_code="62701",
            country="US",
            hours_Mo="09:00-17:00",
            hours_Tu="09:00-17:00",
            area_served="Brooklyn, Queens",
            serves_cuisine="Diner",
            accepts_reservations="True",
            latitude="",
            longitude="",
        ))
        # untouched extra form as a browser would post it
        data.update(self.form_fields(1, location_id="", business_type="LocalBusiness", accepts_reservations=""))

        resp = self.client.post("/admin/local-seo/", data)
        self.assertEqual(resp.status_code, 302)

        records = list(self.store.all().values())
        self.assertEqual(len(records), 1)
        record = records[0]
        self.assertTrue(record.id.startswith("loc_"))
        self.assertEqual(record.area_served, ["Brooklyn", "Queens"])
        self.assertIs(record.accepts_reservations, Reservations.ACCEPTS)
        self.assertEqual(record.opening_hours["Mo"], "09:00-17:00")
        self.assertIsNone(record.latitude)

    def test_post_deletes_location(self):
        self.store.replace_all({"loc_1": location("Keep"), "loc_2": location("Drop")})
        self.client.force_login(self.staff)

        data = self.management_form(total=2, initial=2)
        for index, (location_id, name) in enumerate((("loc_1", "Keep"), ("loc_2", "Drop"))):
            fields = location(name)
            fields["location_id"] = location_id
            if name == "Drop":
                fields["DELETE"] = "on"
            data.update(self.form_fields(index, **fields))

        resp = self.client.post("/admin/local-seo/", data)
        self.assertEqual(resp.status_code, 302)
        self.assertEqual(list(self.store.all()), ["loc_1"])

    def test_invalid_post_shows_errors_and_keeps_store(self):
        self.store.replace_all({"loc_1": location("Original")})
        self.client.force_login(self.staff)

        data = self.management_form(total=1, initial=1)
        fields = location("Changed", url="not a url")
        fields["location_id"] = "loc_1"
        data.update(self.form_fields(0, **fields))

        resp = self.client.post("/admin/local-seo/", data)
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.context["formset"].forms[0].errors)
        self.assertEqual(self.store.get("loc_1").name, "Original")

    def test_stored_draft_does_not_block_saving(self):
        self.store.replace_all({"loc_1": location("Complete"), "loc_2": {"name": "Draft"}})
        self.client.force_login(self.staff)

        data = self.management_form(total=2, initial=2)
        complete = location("Complete, renamed")
        complete["location_id"] = "loc_1"
        data.update(self.form_fields(0, **complete))
        data.update(self.form_fields(1, location_id="loc_2", name="Draft", business_type="LocalBusiness"))

        resp = self.client.post("/admin/local-seo/", data)
        self.assertEqual(resp.status_code, 302)
        self.assertEqual(self.store.get("loc_1").name, "Complete, renamed")
        self.assertEqual(self.store.get("loc_2").name, "Draft")
        self.assertFalse(self.store.get("loc_2").is_complete)

    def test_new_location_needs_name_and_address(self):
        self.client.force_login(self.staff)

        data = self.management_form(total=1, initial=0)
        data.update(self.form_fields(0, location_id="", name="Half done", business_type="LocalBusiness"))

        resp = self.client.post("/admin/local-seo/", data)
        self.assertEqual(resp.status_code, 200)
        errors = resp.context["formset"].forms[0].errors
        self.assertIn("street_address", errors)
        self.assertIn("country", errors)
        self.assertNotIn("name", errors)
        self.assertEqual(self.store.all(), {})

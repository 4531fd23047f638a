from django.test import TestCase

from .models import SystemSetting
from .options import delete_option, get_option, update_option


class OptionsTests(TestCase):

    def test_missing_option_returns_default(self):
        self.assertIsNone(get_option("absent"))
        self.assertEqual(get_option("absent", {}), {})

    def test_round_trip_keeps_key_order(self):
        value = {"loc_z": {"name": "Z"}, "loc_a": {"name": "Ä"}, "loc_m": {"name": "M"}}
        update_option("locations", value)
        self.assertEqual(list(get_option("locations")), ["loc_z", "loc_a", "loc_m"])
        self.assertEqual(get_option("locations")["loc_a"]["name"], "Ä")

    def test_update_overwrites_single_row(self):
        update_option("flag", 1)
        update_option("flag", 2)
        self.assertEqual(get_option("flag"), 2)
        self.assertEqual(SystemSetting.objects.filter(key="flag").count(), 1)

    def test_corrupt_json_returns_default(self):
        SystemSetting.objects.create(key="broken", value="{not json")
        with self.assertLogs("configmgr.options", level="WARNING"):
            self.assertEqual(get_option("broken", {}), {})

    def test_delete_option(self):
        update_option("temp", "x")
        self.assertTrue(delete_option("temp"))
        self.assertFalse(delete_option("temp"))
        self.assertIsNone(get_option("temp"))

    def test_unserializable_value_raises(self):
        with self.assertRaises(TypeError):
            update_option("bad", {"value": object()})
        self.assertFalse(SystemSetting.objects.filter(key="bad").exists())

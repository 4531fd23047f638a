from django.db import models

class SystemSetting(models.Model):
    """
    Simple key/value settings store.
    Values are JSON text written through configmgr.options, e.g.:
      - local_seo_schema_locations -> {"loc_1": {"name": "...", ...}, ...}
    Stored as text (not JSONField) so object key order survives on every backend.
    """
    key = models.CharField(max_length=100, unique=True)
    value = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.key

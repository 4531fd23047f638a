"""
options.py
----------
get/set/delete of a single JSON-serializable value per key, on top of
SystemSetting rows.

- get_option never raises for missing rows or corrupt JSON; it logs and
  returns the default instead.
- update_option upserts inside a transaction so readers see either the old
  or the new record.
"""

import json
import logging

from django.db import transaction

from .models import SystemSetting

logger = logging.getLogger(__name__)


def get_option(key: str, default=None):
    row = SystemSetting.objects.filter(key=key).first()
    if row is None or not row.value:
        return default
    try:
        return json.loads(row.value)
    except ValueError:
        logger.warning("Setting %r holds invalid JSON; using default", key)
        return default


@transaction.atomic
def update_option(key: str, value) -> None:
    """
    Raises:
        TypeError: if value is not JSON-serializable.
    """
    SystemSetting.objects.update_or_create(
        key=key,
        defaults={"value": json.dumps(value, ensure_ascii=False)},
    )
    logger.info("Setting %r updated", key)


@transaction.atomic
def delete_option(key: str) -> bool:
    deleted, _ = SystemSetting.objects.filter(key=key).delete()
    if deleted:
        logger.info("Setting %r deleted", key)
    return bool(deleted)

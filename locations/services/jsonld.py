"""
jsonld.py
---------
Serializes schema dicts to the text embedded in pages.

- Pretty printed (4-space indent), unescaped unicode and forward slashes so
  external validators get readable output.
- "<", ">" and "&" are written as unicode escapes (same mapping as Django's
  json_script) so a value can never close the <script> element.
"""

import json

from django.utils.html import format_html
from django.utils.safestring import mark_safe

SCRIPT_ESCAPES = {
    ord(">"): "\\u003E",
    ord("<"): "\\u003C",
    ord("&"): "\\u0026",
}


def to_json_ld(schema: dict) -> str:
    text = json.dumps(schema, ensure_ascii=False, indent=4)
    return text.translate(SCRIPT_ESCAPES)


def to_script_tag(schema: dict) -> str:
    return format_html(
        '<script type="application/ld+json">{}</script>',
        mark_safe(to_json_ld(schema)),
    )


def to_script_tags(schemas) -> str:
    """One script block per schema, newline separated."""
    return mark_safe("\n".join(to_script_tag(schema) for schema in schemas))

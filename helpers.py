"""Pure helpers behind the create, history and glossary screens."""

import re
from datetime import date, datetime
from zoneinfo import ZoneInfo

from config import short_label

SPANISH_MONTHS = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>$])")


def field_value_to_text(value):
    """Widget value -> the string stored in fields_data ('1200', '1200.5', '2025-02-14')."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape_markdown(text):
    """Backslash-escapes user text so st.markdown shows it literally."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text or "")


def filter_terms(terms, query):
    """
    Keeps the terms whose term, definition or category contains the query,
    ignoring case. A blank query keeps everything.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(terms)
    return [
        t for t in terms
        if needle in (t.get("term") or "").lower()
        or needle in (t.get("definition") or "").lower()
        or needle in (t.get("category") or "").lower()
    ]


def format_created_at(value, timezone=None):
    """
    ISO timestamp -> '5 de marzo, 2025', read in `timezone` when one is given.
    Anything unparseable comes back untouched.
    """
    try:
        # Postgres sends "+00:00"; older Pythons reject a trailing "Z".
        created = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return value
    if timezone and created.tzinfo is not None:
        created = created.astimezone(ZoneInfo(timezone))
    return f"{created.day} de {SPANISH_MONTHS[created.month - 1]}, {created.year}"


def history_rows(documents, timezone=None):
    return [
        {
            "id": doc["id"],
            "document_type": doc.get("document_type"),
            "type": short_label(doc.get("document_type")),
            "title": doc.get("title") or "",
            "created": format_created_at(doc.get("created_at"), timezone),
            "file_url": doc.get("file_url"),
        }
        for doc in documents
    ]

"""Keep paired Persian/Gregorian date fields on a document in step."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple

from .. import hooks
from . import converter

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except ImportError:  # pragma: no cover - plain Python usage
    frappe = None  # type: ignore

__all__ = [
    "get_field_pairs",
    "gregorian_to_persian_string",
    "persian_to_gregorian_string",
    "sync_date_pair",
    "sync_document_dates",
]

logger = logging.getLogger(__name__)

VALID_PREFERENCES = {"persian", "gregorian"}

FieldPair = Tuple[str, str]


def _get(doc: Any, field: str) -> Optional[str]:
    if isinstance(doc, dict):
        value = doc.get(field)
    else:
        value = getattr(doc, field, None)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _set(doc: Any, field: str, value: str) -> None:
    if isinstance(doc, dict):
        doc[field] = value
    else:  # ``doc`` is typically a ``frappe.model.document.Document``
        setattr(doc, field, value)


def _same_day(parse: Callable[[str], Tuple[int, int, int]], current: str, value: str) -> bool:
    # an unparseable stale value counts as a disagreement
    try:
        return parse(current) == parse(value)
    except ValueError:
        return False


def sync_date_pair(
    doc: Any,
    persian_field: str,
    gregorian_field: str,
    prefer: str = "persian",
) -> Optional[str]:
    """Fill whichever side of a Persian/Gregorian field pair is stale.

    Returns the name of the field that was written, or ``None`` when the pair
    was already consistent or both sides are empty.
    """

    prefer = (prefer or "").strip().lower()
    if prefer not in VALID_PREFERENCES:
        raise ValueError(
            "prefer must be one of: {}".format(", ".join(sorted(VALID_PREFERENCES)))
        )

    persian_value = _get(doc, persian_field)
    gregorian_value = _get(doc, gregorian_field)

    if persian_value is None and gregorian_value is None:
        return None

    if persian_value is not None and gregorian_value is not None:
        source = prefer
    else:
        source = "persian" if persian_value is not None else "gregorian"

    if source == "persian":
        target, current = gregorian_field, gregorian_value
        value = converter.convert_persian_string(persian_value)
        parse = converter.coerce_gregorian
    else:
        target, current = persian_field, persian_value
        value = converter.convert_gregorian_string(gregorian_value)
        parse = converter.coerce_persian

    if current is not None and _same_day(parse, current, value):
        return None

    _set(doc, target, value)
    logger.debug("synced %s=%s from %s", target, value, source)
    return target


def get_field_pairs(doctype: Optional[str]) -> List[FieldPair]:
    """Return the configured ``(persian_field, gregorian_field)`` pairs.

    Inside Frappe the pairs declared by every installed app are merged through
    ``frappe.get_hooks``; otherwise this app's ``hooks.py`` is used.
    """

    if not doctype:
        return []
    if frappe:
        pairs: Iterable[FieldPair] = frappe.get_hooks("persian_date_field_pairs").get(doctype, [])  # type: ignore[attr-defined]
    else:
        pairs = hooks.persian_date_field_pairs.get(doctype, ())
    return [tuple(pair) for pair in pairs]  # type: ignore[misc]


def sync_document_dates(doc: Any, method: Optional[str] = None) -> List[str]:
    """``validate`` doc-event handler syncing every configured field pair."""

    doctype = doc.get("doctype") if isinstance(doc, dict) else getattr(doc, "doctype", None)
    written = []
    for persian_field, gregorian_field in get_field_pairs(doctype):
        target = sync_date_pair(doc, persian_field, gregorian_field)
        if target:
            written.append(target)
    if written:
        logger.info("updated %s on %s during %s", ", ".join(written), doctype, method or "sync")
    return written


def persian_to_gregorian_string(value: Optional[str] = None) -> str:
    """Convert a picker value such as ``1403/01/01`` to ``2024-03-20``."""

    return converter.convert_persian_string(value or "")


def gregorian_to_persian_string(value: Optional[str] = None) -> str:
    return converter.convert_gregorian_string(value or "")


def _maybe_whitelist(func):  # pragma: no cover - exercised in Frappe environments
    if frappe and hasattr(frappe, "whitelist"):
        return frappe.whitelist(allow_guest=False)(func)  # type: ignore[attr-defined]
    return func


persian_to_gregorian_string = _maybe_whitelist(persian_to_gregorian_string)
gregorian_to_persian_string = _maybe_whitelist(gregorian_to_persian_string)

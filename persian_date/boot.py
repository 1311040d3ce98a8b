"""Hook implementations that expose Persian date data to the Frappe desk."""
from __future__ import annotations

import logging

from .api import converter

logger = logging.getLogger(__name__)


def get_boot_context():
    today = converter.GregorianDate.today()
    return {
        "month_names": list(converter.PERSIAN_MONTH_NAMES),
        "today_gregorian": today.format(),
        "today_persian": today.to_persian().format(),
    }


def boot_session(bootinfo):
    """Inject month names and today's dates into the boot payload."""

    context = get_boot_context()
    if isinstance(bootinfo, dict):
        bootinfo.setdefault("persian_date", context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, "persian_date", context)
    logger.debug("boot payload extended with persian_date for %s", context["today_persian"])

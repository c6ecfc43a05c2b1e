from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from django.conf import settings
from django.utils import formats, timezone

DateLike = Union[date, datetime]


def _calendar_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    return value


def medium_date(value: Optional[DateLike]) -> str:
    """Render a date as e.g. "Apr 10, 2023", or "" when it is missing."""
    if value is None:
        return ""
    return formats.date_format(_calendar_date(value), settings.CATALOG_DATE_FORMAT)


def iso_date(value: Optional[DateLike]) -> str:
    """Render a date as YYYY-MM-DD, the value <input type="date"> expects."""
    if value is None:
        return ""
    return _calendar_date(value).isoformat()


def full_name(first_name: Optional[str], family_name: Optional[str]) -> str:
    if first_name and family_name:
        return f"{family_name}, {first_name}"
    return ""


def record_url(kind: str, pk) -> str:
    if pk is None:
        return ""
    return f"{settings.CATALOG_URL_PREFIX}/{kind}/{pk}"

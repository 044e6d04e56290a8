"""
Revenue aggregation over confirmed bookings.

Prices are stored as the text the client sent. They are read the way a
browser's parseFloat reads them: the leading number counts ("12.5 USD" is
12.5), and text with no leading number counts as 0 rather than failing the
whole report.
"""

import math
import re
from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from tripbook.models.booking import BookingStatus
from tripbook.schemas import BookingRecord, RevenueReport

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_price(price: Optional[str]) -> float:
    if not price:
        return 0.0
    match = _LEADING_NUMBER.match(price)
    if not match:
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def month_key(start_date: str) -> Optional[str]:
    """Year-month key ("2024-01") for a date or datetime string, else None."""
    try:
        parsed = date.fromisoformat(start_date.strip()[:10])
    except ValueError:
        return None
    return f"{parsed.year:04d}-{parsed.month:02d}"


def summarize_revenue(bookings: Iterable[BookingRecord]) -> RevenueReport:
    total = 0.0
    monthly: dict[str, float] = defaultdict(float)
    by_host: dict[int, float] = defaultdict(float)

    for booking in bookings:
        if booking.status is not BookingStatus.CONFIRMED:
            continue
        amount = parse_price(booking.price)
        total += amount
        by_host[booking.host_id] += amount
        month = month_key(booking.start_date)
        if month is not None:
            monthly[month] += amount

    return RevenueReport(
        total_revenue=total,
        monthly_revenue=dict(sorted(monthly.items())),
        revenue_by_host=dict(sorted(by_host.items())),
    )

"""
Revenue report returned by the admin dashboard endpoint.
"""

from tripbook.schemas.base import CamelModel


class RevenueReport(CamelModel):
    total_revenue: float = 0.0
    monthly_revenue: dict[str, float] = {}
    revenue_by_host: dict[int, float] = {}

"""
Account ranking, dashboard metrics and rule-based smart insights.
"""
import math
from typing import Any, Iterable, List, Optional, Sequence

from call_assist.models.customer import CustomerRecord, PaymentStatus, RiskLevel
from call_assist.models.schemas import (
    DashboardMetrics,
    InsightType,
    SmartInsight,
    SortDirection,
    SortField,
)

ALL_RISK_LEVELS = "all"


def filter_accounts(
    customers: Iterable[CustomerRecord],
    search: Optional[str] = None,
    risk_level: Optional[str] = None,
) -> List[CustomerRecord]:
    """
    Filter accounts by a search term and risk level.

    The search term matches business name or customer id, case-insensitive.
    A risk level of None or "all" keeps every level.
    """
    term = (search or "").strip().lower()
    wanted_risk = None
    if risk_level and risk_level.lower() != ALL_RISK_LEVELS:
        wanted_risk = RiskLevel(risk_level)

    filtered = []
    for customer in customers:
        if term and term not in customer.business_name.lower() and term not in customer.customer_id.lower():
            continue
        if wanted_risk is not None and customer.risk_level != wanted_risk:
            continue
        filtered.append(customer)
    return filtered


def _sort_key(customer: CustomerRecord, field: SortField) -> Any:
    value = getattr(customer, field.value)
    if isinstance(value, RiskLevel):
        value = value.value
    if isinstance(value, str):
        return value.lower()
    return value


def sort_accounts(
    customers: Iterable[CustomerRecord],
    sort_by: SortField = SortField.DAYS_OVERDUE,
    direction: SortDirection = SortDirection.DESC,
) -> List[CustomerRecord]:
    """Stable sort; text columns compare case-insensitively."""
    return sorted(
        customers,
        key=lambda customer: _sort_key(customer, sort_by),
        reverse=direction == SortDirection.DESC,
    )


def rank_accounts(
    customers: Iterable[CustomerRecord],
    search: Optional[str] = None,
    risk_level: Optional[str] = None,
    sort_by: SortField = SortField.DAYS_OVERDUE,
    direction: SortDirection = SortDirection.DESC,
) -> List[CustomerRecord]:
    """Filter then sort, most overdue first by default."""
    return sort_accounts(filter_accounts(customers, search, risk_level), sort_by, direction)


def compute_dashboard_metrics(
    customers: Sequence[CustomerRecord],
    contacted_ids: Iterable[str],
) -> DashboardMetrics:
    """Headline metrics for the dashboard panel."""
    total_accounts = len(customers)
    known_ids = {customer.customer_id for customer in customers}
    contacted = len(known_ids.intersection(contacted_ids))
    total_overdue = sum(customer.amount_due for customer in customers)

    ptp_percentage = 0
    if total_accounts > 0:
        # Round half up, matching the dashboard display
        ptp_percentage = int(math.floor(contacted / total_accounts * 100 + 0.5))

    return DashboardMetrics(
        total_accounts=total_accounts,
        contacted_accounts=contacted,
        total_overdue=total_overdue,
        ptp_percentage=ptp_percentage,
    )


def generate_smart_insights(customer: CustomerRecord) -> List[SmartInsight]:
    """Rule-based call guidance derived from the account record."""
    insights = []

    paid_count = sum(1 for entry in customer.history if entry.status == PaymentStatus.PAID)
    if paid_count >= 2:
        insights.append(SmartInsight(
            type=InsightType.BEHAVIOR,
            text="Consistently late but pays eventually. Approach with payment plan options.",
        ))

    if customer.days_overdue > 20:
        insights.append(SmartInsight(
            type=InsightType.PRIORITY,
            text="High priority: Account significantly overdue. Consider escalation if no response.",
        ))
    elif customer.days_overdue > 10:
        insights.append(SmartInsight(
            type=InsightType.PRIORITY,
            text="Moderate urgency: Follow up within 48 hours to prevent further delinquency.",
        ))

    insights.append(SmartInsight(
        type=InsightType.TIMING,
        text="Best contact time: 2-4 PM weekdays (based on industry data).",
    ))

    if customer.risk_level == RiskLevel.HIGH:
        insights.append(SmartInsight(
            type=InsightType.STRATEGY,
            text="Recommended: Offer structured payment plan with weekly installments.",
        ))
    elif customer.risk_level == RiskLevel.MEDIUM:
        insights.append(SmartInsight(
            type=InsightType.STRATEGY,
            text="Recommended: Negotiate bi-weekly payment schedule to maintain engagement.",
        ))

    return insights

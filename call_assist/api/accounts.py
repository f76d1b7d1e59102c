"""
Account list, detail, insights and dashboard metrics endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from call_assist.core.dependencies import get_account_repository
from call_assist.core.exceptions import NotFoundError
from call_assist.core.logging import get_logger
from call_assist.models.customer import CustomerRecord
from call_assist.models.schemas import (
    AccountListResponse,
    DashboardMetrics,
    InsightsResponse,
    SortDirection,
    SortField,
)
from call_assist.services.account_repository import AccountRepository
from call_assist.services.accounts_service import (
    compute_dashboard_metrics,
    generate_smart_insights,
    rank_accounts,
)

router = APIRouter()
logger = get_logger(__name__)


def get_account_or_404(customer_id: str, repository: AccountRepository) -> CustomerRecord:
    """Look up an account, raising 404 when unknown."""
    customer = repository.get_account(customer_id)
    if customer is None:
        logger.warning("Account not found", customer_id=customer_id)
        raise NotFoundError("Account", customer_id)
    return customer


@router.get("/accounts", response_model=AccountListResponse)
async def list_accounts(
    search: Optional[str] = Query(default=None, max_length=100, description="Business name or customer ID"),
    risk_level: str = Query(default="all", pattern="^(all|Low|Medium|High)$", description="Risk filter"),
    sort_by: SortField = Query(default=SortField.DAYS_OVERDUE),
    sort_direction: SortDirection = Query(default=SortDirection.DESC),
    repository: AccountRepository = Depends(get_account_repository),
):
    """Ranked overdue accounts, most overdue first by default."""
    accounts = rank_accounts(
        repository.list_accounts(),
        search=search,
        risk_level=risk_level,
        sort_by=sort_by,
        direction=sort_direction,
    )
    return AccountListResponse(
        accounts=accounts,
        total=len(accounts),
        sort_by=sort_by,
        sort_direction=sort_direction,
    )


@router.get("/accounts/{customer_id}", response_model=CustomerRecord)
async def get_account(
    customer_id: str,
    repository: AccountRepository = Depends(get_account_repository),
):
    """Account detail."""
    return get_account_or_404(customer_id, repository)


@router.get("/accounts/{customer_id}/insights", response_model=InsightsResponse)
async def get_account_insights(
    customer_id: str,
    repository: AccountRepository = Depends(get_account_repository),
):
    """Smart insights for the account detail view."""
    customer = get_account_or_404(customer_id, repository)
    return InsightsResponse(customer_id=customer_id, insights=generate_smart_insights(customer))


@router.get("/dashboard/metrics", response_model=DashboardMetrics)
async def get_dashboard_metrics(
    repository: AccountRepository = Depends(get_account_repository),
):
    """Headline portfolio metrics."""
    return compute_dashboard_metrics(repository.list_accounts(), repository.contacted_ids)

"""Pydantic schemas for request/response models."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from call_assist.models.customer import CustomerRecord


class SortField(str, Enum):
    """Account table sort columns."""
    BUSINESS_NAME = "business_name"
    AMOUNT_DUE = "amount_due"
    DAYS_OVERDUE = "days_overdue"
    RISK_LEVEL = "risk_level"


class SortDirection(str, Enum):
    """Sort order."""
    ASC = "asc"
    DESC = "desc"


class InsightType(str, Enum):
    """Smart insight categories shown on the account detail view."""
    BEHAVIOR = "behavior"
    PRIORITY = "priority"
    TIMING = "timing"
    STRATEGY = "strategy"


# Request Models
class CallSummaryRequest(BaseModel):
    """Call notes submitted by the agent after a call."""
    notes: str = Field(..., max_length=10000, description="Free-text call notes")


# Response Models
class AccountListResponse(BaseModel):
    """Filtered and sorted account list."""
    accounts: List[CustomerRecord]
    total: int
    sort_by: SortField
    sort_direction: SortDirection


class SmartInsight(BaseModel):
    """Rule-based guidance for the agent."""
    type: InsightType
    text: str


class InsightsResponse(BaseModel):
    """Insights for one account."""
    customer_id: str
    insights: List[SmartInsight]


class DashboardMetrics(BaseModel):
    """Headline numbers for the collections dashboard."""
    total_accounts: int
    contacted_accounts: int
    total_overdue: float
    ptp_percentage: int = Field(..., ge=0, le=100, description="Promise-to-pay percentage")


class CallScriptResponse(BaseModel):
    """Generated call script."""
    customer_id: str
    script: str


class CallSummaryResponse(BaseModel):
    """Summarized call outcome."""
    customer_id: str
    summary: str
    next_action: str


class CallAssistStatus(BaseModel):
    """Configuration state of the AI assistant."""
    ai_configured: bool
    warning: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    version: str
    uptime_seconds: float
    timestamp: datetime
    service_name: str
    ai_configured: bool

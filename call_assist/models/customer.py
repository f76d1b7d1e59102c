"""
Customer account records consumed by the call-assist service.

Records are owned by the account store and are read-only here, so every
model is frozen. Field names are snake_case; camelCase keys exported by the
dashboard front end are accepted on input.
"""
import datetime
from enum import Enum
from typing import List

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


_RECORD_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=AliasGenerator(validation_alias=to_camel),
)


class RiskLevel(str, Enum):
    """Account risk levels."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class PaymentStatus(str, Enum):
    """Outcome of a scheduled payment."""
    PAID = "Paid"
    MISSED = "Missed"
    PARTIAL = "Partial"


class PaymentHistoryEntry(BaseModel):
    """One scheduled payment and its outcome."""
    model_config = _RECORD_CONFIG

    date: datetime.date
    amount: float = Field(..., ge=0)
    status: PaymentStatus


class ActiveLoan(BaseModel):
    """Another loan the business currently holds."""
    model_config = _RECORD_CONFIG

    loan_id: str
    product: str
    balance: float = Field(..., ge=0)
    term_remaining: str


class CustomerRecord(BaseModel):
    """Overdue business loan account."""
    model_config = _RECORD_CONFIG

    customer_id: str = Field(..., min_length=1, description="Customer identifier")
    business_name: str = Field(..., min_length=1)
    contact: str
    loan_product: str
    loan_id: str
    amount_due: float = Field(..., ge=0, description="Overdue amount in dollars")
    due_date: datetime.date
    days_overdue: int = Field(..., ge=0)
    risk_level: RiskLevel
    other_active_loans: List[ActiveLoan] = Field(default_factory=list)
    last_payment_date: datetime.date
    history: List[PaymentHistoryEntry] = Field(default_factory=list)

"""
Models package for the Collections Call-Assist Service.
"""
from .customer import ActiveLoan, CustomerRecord, PaymentHistoryEntry, PaymentStatus, RiskLevel
from .generation import BackendResult, GenerationRequest, ScriptRequest, SummaryRequest, SummaryResult

__all__ = [
    "ActiveLoan",
    "BackendResult",
    "CustomerRecord",
    "GenerationRequest",
    "PaymentHistoryEntry",
    "PaymentStatus",
    "RiskLevel",
    "ScriptRequest",
    "SummaryRequest",
    "SummaryResult",
]

"""
Read-only in-memory account store.
"""
from typing import Any, Dict, Iterable, List, Optional, Tuple

import structlog

from call_assist.data.sample_accounts import SAMPLE_ACCOUNTS, SAMPLE_CONTACTED_IDS
from call_assist.models.customer import CustomerRecord

logger = structlog.get_logger(__name__)


class AccountRepository:
    """Holds the overdue account portfolio. Records are never mutated."""

    def __init__(
        self,
        accounts: Iterable[Dict[str, Any]] = SAMPLE_ACCOUNTS,
        contacted_ids: Iterable[str] = SAMPLE_CONTACTED_IDS,
    ):
        records = [CustomerRecord.model_validate(account) for account in accounts]
        self._accounts: Tuple[CustomerRecord, ...] = tuple(records)
        self._by_id: Dict[str, CustomerRecord] = {r.customer_id: r for r in records}
        self._contacted_ids = frozenset(contacted_ids)

        logger.info(
            "Account repository loaded",
            account_count=len(self._accounts),
            contacted_count=len(self._contacted_ids),
        )

    def list_accounts(self) -> List[CustomerRecord]:
        return list(self._accounts)

    def get_account(self, customer_id: str) -> Optional[CustomerRecord]:
        return self._by_id.get(customer_id)

    @property
    def contacted_ids(self) -> frozenset:
        return self._contacted_ids

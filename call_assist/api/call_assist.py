"""
AI call-assist endpoints: call scripts and call-note summaries.
"""
from fastapi import APIRouter, Depends

from call_assist.api.accounts import get_account_or_404
from call_assist.core.dependencies import get_account_repository, get_call_assist_service
from call_assist.core.exceptions import ValidationException, map_validation_exception
from call_assist.core.logging import get_logger
from call_assist.models.schemas import (
    CallAssistStatus,
    CallScriptResponse,
    CallSummaryRequest,
    CallSummaryResponse,
)
from call_assist.services.account_repository import AccountRepository
from call_assist.services.call_assist_service import CallAssistService

router = APIRouter()
logger = get_logger(__name__)

NOT_CONFIGURED_WARNING = (
    "Gemini API key not configured. Set GEMINI_API_KEY to enable AI scripts "
    "and summaries; fallback content will be used until then."
)


@router.get("/call-assist/status", response_model=CallAssistStatus)
async def get_call_assist_status(
    service: CallAssistService = Depends(get_call_assist_service),
):
    """Whether the AI backend is configured."""
    configured = service.ai_configured
    return CallAssistStatus(
        ai_configured=configured,
        warning=None if configured else NOT_CONFIGURED_WARNING,
    )


@router.post("/accounts/{customer_id}/call-script", response_model=CallScriptResponse)
async def generate_call_script(
    customer_id: str,
    repository: AccountRepository = Depends(get_account_repository),
    service: CallAssistService = Depends(get_call_assist_service),
):
    """Generate a call script for the account."""
    customer = get_account_or_404(customer_id, repository)
    script = await service.generate_call_script(customer)
    return CallScriptResponse(customer_id=customer_id, script=script)


@router.post("/accounts/{customer_id}/call-summary", response_model=CallSummaryResponse)
async def summarize_call(
    customer_id: str,
    request: CallSummaryRequest,
    repository: AccountRepository = Depends(get_account_repository),
    service: CallAssistService = Depends(get_call_assist_service),
):
    """Summarize call notes and suggest the next action."""
    customer = get_account_or_404(customer_id, repository)

    try:
        result = await service.summarize_call(request.notes, customer)
    except ValidationException as e:
        logger.warning("Call summary rejected", customer_id=customer_id, error=str(e))
        raise map_validation_exception(e)

    return CallSummaryResponse(
        customer_id=customer_id,
        summary=result.summary,
        next_action=result.next_action,
    )

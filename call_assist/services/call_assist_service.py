"""
AI call-assist orchestration: call scripts and call-note summaries.

Both entrypoints always hand usable content back to the caller. Backend
failures are logged and replaced by locally generated fallbacks; the only
error a caller sees is a validation failure for blank call notes.
"""
from typing import Optional

import structlog

from call_assist.core.exceptions import ValidationException
from call_assist.core.logging import correlation_context, log_business_event, performance_timing
from call_assist.models.customer import CustomerRecord
from call_assist.models.generation import ScriptRequest, SummaryRequest, SummaryResult
from call_assist.services.fallback import fallback_script, fallback_summary
from call_assist.services.gemini_client import GeminiClient
from call_assist.services.prompt_builder import build_prompt
from call_assist.services.response_parser import parse_summary

logger = structlog.get_logger(__name__)


class CallAssistService:
    """Service composing prompt building, the Gemini client and fallbacks."""

    def __init__(self, client: Optional[GeminiClient] = None):
        self.client = client or GeminiClient()

    @property
    def ai_configured(self) -> bool:
        return self.client.is_configured

    async def generate_call_script(self, customer: CustomerRecord) -> str:
        """
        Generate a collections call script for an account.

        Args:
            customer: Account the agent is about to call

        Returns:
            Script text from the backend, or the fallback script when the
            backend fails or returns blank text
        """
        with correlation_context(customer_id=customer.customer_id), performance_timing("generate_call_script"):
            prompt = build_prompt(ScriptRequest(customer=customer))
            result = await self.client.invoke(prompt)

            if result.ok and result.text.strip():
                script = result.text
                fallback_used = False
            else:
                if result.ok:
                    logger.warning("Gemini returned a blank script, using fallback")
                else:
                    logger.warning(
                        "Call script generation failed, using fallback",
                        error_kind=result.error.kind,
                        error=str(result.error),
                    )
                script = fallback_script(customer)
                fallback_used = True

            log_business_event(
                "call_script_generated",
                customer_id=customer.customer_id,
                fallback_used=fallback_used,
                script_length=len(script),
            )
            return script

    async def summarize_call(self, notes: str, customer: CustomerRecord) -> SummaryResult:
        """
        Summarize call notes and suggest the next action.

        Args:
            notes: Agent's free-text call notes
            customer: Account the call was about

        Returns:
            SummaryResult parsed from the backend reply, or the fallback summary

        Raises:
            ValidationException: If notes are empty or whitespace only
        """
        if not notes or not notes.strip():
            raise ValidationException("Please enter call notes", field="notes", value=notes)

        with correlation_context(customer_id=customer.customer_id), performance_timing("summarize_call"):
            prompt = build_prompt(SummaryRequest(customer=customer, notes=notes))
            result = await self.client.invoke(prompt)

            if result.ok:
                summary = parse_summary(result.text)
                fallback_used = False
            else:
                logger.warning(
                    "Call summarization failed, using fallback",
                    error_kind=result.error.kind,
                    error=str(result.error),
                )
                summary = fallback_summary(customer)
                fallback_used = True

            log_business_event(
                "call_summarized",
                customer_id=customer.customer_id,
                fallback_used=fallback_used,
                next_action=summary.next_action,
            )
            return summary

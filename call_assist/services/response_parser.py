"""
Extraction of structured call summaries from free-text backend replies.

The backend is asked to answer with ``SUMMARY:`` and ``NEXT ACTION:`` lines,
but nothing guarantees it does. ``parse_summary`` never fails: any field it
cannot extract is replaced by a fixed default.
"""
import re

from call_assist.models.generation import SummaryResult

DEFAULT_NEXT_ACTION = "Follow-up in 3 days"
DEFAULT_SUMMARY = "No summary available."
SUMMARY_FALLBACK_LENGTH = 200

SUMMARY_PATTERN = re.compile(r"SUMMARY:\s*(.+?)(?=NEXT ACTION:|\Z)", re.DOTALL)
NEXT_ACTION_PATTERN = re.compile(r"NEXT ACTION:\s*(.+)\Z", re.DOTALL)


def extract_summary(reply: str) -> str:
    match = SUMMARY_PATTERN.search(reply)
    if match:
        summary = match.group(1).strip()
    else:
        # Raw slice; may cut mid-word.
        summary = reply[:SUMMARY_FALLBACK_LENGTH]
    return summary if summary.strip() else DEFAULT_SUMMARY


def extract_next_action(reply: str) -> str:
    match = NEXT_ACTION_PATTERN.search(reply)
    action = match.group(1).strip() if match else ""
    return action or DEFAULT_NEXT_ACTION


def parse_summary(reply: str) -> SummaryResult:
    """
    Parse a summarization reply into a SummaryResult.

    Args:
        reply: Raw backend text

    Returns:
        SummaryResult with both fields populated
    """
    reply = reply or ""
    return SummaryResult(
        summary=extract_summary(reply),
        next_action=extract_next_action(reply),
    )

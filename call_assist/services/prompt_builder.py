"""
Prompt rendering for call-script generation and call summarization.

Every builder is a pure function of its inputs: the same record and notes
always render the same prompt text.
"""
import json
from typing import Any, Dict

from call_assist.models.customer import CustomerRecord
from call_assist.models.generation import GenerationRequest, ScriptRequest, SummaryRequest
from call_assist.utils.formatting import format_currency, json_amount

SCRIPT_INSTRUCTIONS = """Create a practical script that includes:
1. Brief greeting and identification
2. Specific loan details (product, amount, days overdue)
3. Key talking points for the agent
4. 2-3 clear payment options
5. Promise to pay commitment and follow-up
6. Professional closing

CRITICAL FORMATTING REQUIREMENTS:
- NO markdown formatting (no **, [], *, etc.)
- NO placeholders like [Agent Name], [Contact Person], [Company Name]
- NO brackets or parentheses for instructions
- Write as plain text conversation
- Use actual values from customer data
- Write as if speaking directly to the customer
- Keep it under 200 words and conversational
- Include specific language about payment commitments and follow-up dates
- Format as a simple conversation, not a script with notes

EXAMPLE FORMAT:
Good morning, this is calling from Bizcap Collections regarding TechStart Solutions' Business Cash Advance account. I need to discuss your outstanding balance of $18,900 which is now 26 days overdue. Your last payment was received on June 20th. I understand that running a business can be challenging, and I'd like to work with you to find a solution. We have a few options available: full payment today, a structured payment plan, or a partial payment with a commitment for the balance. Can you commit to making a payment by a specific date? I'll follow up with you on that date to confirm receipt. Thank you for your time."""

SUMMARY_INSTRUCTIONS = """Provide:
1. A two-sentence summary of the call
2. A specific next follow-up action (e.g., "Follow-up in 3 days", "Offer payment plan", "Escalate to management", "Schedule callback on a specific date", "Send payment link", etc.)

Format your response as:
SUMMARY: [your summary]
NEXT ACTION: [your recommended action]"""


def script_customer_data(customer: CustomerRecord) -> Dict[str, Any]:
    """Fields of the record that are shared with the backend for a script."""
    return {
        "businessName": customer.business_name,
        "contact": customer.contact,
        "loanProduct": customer.loan_product,
        "amountDue": json_amount(customer.amount_due),
        "daysOverdue": customer.days_overdue,
        "riskLevel": customer.risk_level.value,
        "lastPaymentDate": customer.last_payment_date.isoformat(),
        "otherActiveLoans": [
            {
                "loanId": loan.loan_id,
                "product": loan.product,
                "balance": json_amount(loan.balance),
                "termRemaining": loan.term_remaining,
            }
            for loan in customer.other_active_loans
        ],
    }


def build_script_prompt(customer: CustomerRecord) -> str:
    """Render the call-script instruction for one account."""
    customer_data = json.dumps(script_customer_data(customer), indent=2, ensure_ascii=False)
    return (
        "Generate a clean, professional debt collection call script for a "
        f"collections agent. Use this customer data: {customer_data}\n\n"
        f"{SCRIPT_INSTRUCTIONS}"
    )


def build_summary_prompt(customer: CustomerRecord, notes: str) -> str:
    """Render the call-summary instruction; notes are embedded verbatim."""
    return (
        "Based on this call note from a debt collection call for "
        f"{customer.business_name} (Amount Due: {format_currency(customer.amount_due)}, "
        f"Days Overdue: {customer.days_overdue}):\n\n"
        f'"{notes}"\n\n'
        f"{SUMMARY_INSTRUCTIONS}"
    )


def build_prompt(request: GenerationRequest) -> str:
    """Render the prompt for a generation request."""
    if isinstance(request, ScriptRequest):
        return build_script_prompt(request.customer)
    if isinstance(request, SummaryRequest):
        return build_summary_prompt(request.customer, request.notes)
    raise TypeError(f"Unsupported generation request: {type(request).__name__}")

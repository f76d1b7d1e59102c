"""
Locally generated call content used when the AI backend cannot answer.
"""
from call_assist.models.customer import CustomerRecord
from call_assist.models.generation import SummaryResult
from call_assist.services.response_parser import DEFAULT_NEXT_ACTION
from call_assist.utils.formatting import format_currency


def fallback_script(customer: CustomerRecord) -> str:
    """Build a call script from the account record alone."""
    amount_due = format_currency(customer.amount_due)
    last_payment = customer.last_payment_date.isoformat()

    return f"""Good morning, this is calling from Bizcap Collections regarding {customer.business_name}'s {customer.loan_product} account.

I need to discuss your outstanding balance of {amount_due} which is now {customer.days_overdue} days overdue. Your last payment was received on {last_payment}.

I understand that running a business can be challenging, and I'd like to work with you to find a solution that works for your situation.

We have a few options available:
1. Full payment of {amount_due} today
2. A structured payment plan over the next few weeks
3. A partial payment today with a commitment for the balance

I need to get a commitment from you today. Can you commit to making a payment by a specific date? If so, what date can you commit to and what amount?

I'll note this commitment in our system and follow up with you on that date. If you can't make the payment as promised, please call me before that date so we can discuss alternatives.

Thank you for your time, and I look forward to resolving this together."""


def fallback_summary(customer: CustomerRecord) -> SummaryResult:
    """Canned summary for when the backend call fails."""
    return SummaryResult(
        summary=f"Call completed with {customer.business_name}. Unable to generate AI summary.",
        next_action=DEFAULT_NEXT_ACTION,
    )

"""
Sample overdue business loan portfolio used by the dashboard.
"""

SAMPLE_ACCOUNTS = [
    {
        "customer_id": "C001",
        "business_name": "John's Plumbing Pty Ltd",
        "contact": "+61 400 123 456",
        "loan_product": "Business Cash Advance",
        "loan_id": "L001-01",
        "amount_due": 12500,
        "due_date": "2025-09-15",
        "days_overdue": 21,
        "risk_level": "High",
        "other_active_loans": [
            {"loan_id": "L001-02", "product": "Equipment Finance", "balance": 15000, "term_remaining": "6 months"},
        ],
        "last_payment_date": "2025-07-10",
        "history": [
            {"date": "2025-07-10", "amount": 3000, "status": "Paid"},
            {"date": "2025-08-10", "amount": 3000, "status": "Missed"},
            {"date": "2025-09-10", "amount": 3000, "status": "Missed"},
        ],
    },
    {
        "customer_id": "C002",
        "business_name": "Smith & Sons Construction",
        "contact": "+61 411 234 567",
        "loan_product": "Invoice Finance",
        "loan_id": "L002-01",
        "amount_due": 8750,
        "due_date": "2025-09-25",
        "days_overdue": 11,
        "risk_level": "Medium",
        "other_active_loans": [
            {"loan_id": "L002-02", "product": "Business Cash Advance", "balance": 22000, "term_remaining": "9 months"},
        ],
        "last_payment_date": "2025-08-15",
        "history": [
            {"date": "2025-07-15", "amount": 2500, "status": "Paid"},
            {"date": "2025-08-15", "amount": 2500, "status": "Paid"},
            {"date": "2025-09-15", "amount": 2500, "status": "Missed"},
        ],
    },
    {
        "customer_id": "C003",
        "business_name": "Green Valley Landscaping",
        "contact": "+61 422 345 678",
        "loan_product": "Equipment Finance",
        "loan_id": "L003-01",
        "amount_due": 5200,
        "due_date": "2025-09-28",
        "days_overdue": 8,
        "risk_level": "Low",
        "other_active_loans": [],
        "last_payment_date": "2025-09-01",
        "history": [
            {"date": "2025-07-01", "amount": 1300, "status": "Paid"},
            {"date": "2025-08-01", "amount": 1300, "status": "Paid"},
            {"date": "2025-09-01", "amount": 1300, "status": "Paid"},
            {"date": "2025-09-28", "amount": 1300, "status": "Missed"},
        ],
    },
    {
        "customer_id": "C004",
        "business_name": "TechStart Solutions",
        "contact": "+61 433 456 789",
        "loan_product": "Business Cash Advance",
        "loan_id": "L004-01",
        "amount_due": 18900,
        "due_date": "2025-09-10",
        "days_overdue": 26,
        "risk_level": "High",
        "other_active_loans": [
            {"loan_id": "L004-02", "product": "Invoice Finance", "balance": 12000, "term_remaining": "4 months"},
            {"loan_id": "L004-03", "product": "Equipment Finance", "balance": 8500, "term_remaining": "12 months"},
        ],
        "last_payment_date": "2025-06-20",
        "history": [
            {"date": "2025-06-20", "amount": 4500, "status": "Paid"},
            {"date": "2025-07-20", "amount": 4500, "status": "Missed"},
            {"date": "2025-08-20", "amount": 4500, "status": "Missed"},
        ],
    },
    {
        "customer_id": "C005",
        "business_name": "Cafe Delicious",
        "contact": "+61 444 567 890",
        "loan_product": "Invoice Finance",
        "loan_id": "L005-01",
        "amount_due": 3400,
        "due_date": "2025-09-30",
        "days_overdue": 6,
        "risk_level": "Low",
        "other_active_loans": [],
        "last_payment_date": "2025-09-10",
        "history": [
            {"date": "2025-08-10", "amount": 1700, "status": "Paid"},
            {"date": "2025-09-10", "amount": 1700, "status": "Paid"},
            {"date": "2025-09-30", "amount": 1700, "status": "Missed"},
        ],
    },
    {
        "customer_id": "C006",
        "business_name": "Metro Auto Repairs",
        "contact": "+61 455 678 901",
        "loan_product": "Equipment Finance",
        "loan_id": "L006-01",
        "amount_due": 9800,
        "due_date": "2025-09-20",
        "days_overdue": 16,
        "risk_level": "Medium",
        "other_active_loans": [
            {"loan_id": "L006-02", "product": "Business Cash Advance", "balance": 18000, "term_remaining": "7 months"},
        ],
        "last_payment_date": "2025-08-05",
        "history": [
            {"date": "2025-07-05", "amount": 2450, "status": "Paid"},
            {"date": "2025-08-05", "amount": 2450, "status": "Paid"},
            {"date": "2025-09-05", "amount": 2450, "status": "Missed"},
        ],
    },
    {
        "customer_id": "C007",
        "business_name": "Bright Spark Electrical",
        "contact": "+61 466 789 012",
        "loan_product": "Business Cash Advance",
        "loan_id": "L007-01",
        "amount_due": 14200,
        "due_date": "2025-09-18",
        "days_overdue": 18,
        "risk_level": "High",
        "other_active_loans": [],
        "last_payment_date": "2025-07-25",
        "history": [
            {"date": "2025-07-25", "amount": 3550, "status": "Paid"},
            {"date": "2025-08-25", "amount": 3550, "status": "Missed"},
            {"date": "2025-09-18", "amount": 3550, "status": "Missed"},
        ],
    },
    {
        "customer_id": "C008",
        "business_name": "The Print Shop",
        "contact": "+61 477 890 123",
        "loan_product": "Invoice Finance",
        "loan_id": "L008-01",
        "amount_due": 6100,
        "due_date": "2025-09-27",
        "days_overdue": 9,
        "risk_level": "Medium",
        "other_active_loans": [
            {"loan_id": "L008-02", "product": "Equipment Finance", "balance": 9500, "term_remaining": "8 months"},
        ],
        "last_payment_date": "2025-08-28",
        "history": [
            {"date": "2025-07-28", "amount": 2033, "status": "Paid"},
            {"date": "2025-08-28", "amount": 2033, "status": "Paid"},
            {"date": "2025-09-27", "amount": 2034, "status": "Missed"},
        ],
    },
]

# Accounts already reached this session
SAMPLE_CONTACTED_IDS = ("C001", "C003", "C005")

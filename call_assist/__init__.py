"""Collections Call-Assist Service

Backend for the collections agent dashboard:
- Ranks overdue business loan accounts and surfaces risk signals
- Generates AI call scripts for an account
- Summarizes call notes into a summary and next action
- Falls back to locally generated content when the AI backend is unavailable
"""

__version__ = "1.0.0"

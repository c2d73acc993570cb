"""
Services layer - Business logic goes here.
Each service owns one domain: issues, comments, stats or media.

DESIGN PRINCIPLE:
- Services contain business logic, NOT routes
- Services raise app.core.exceptions errors; routes map them to HTTP codes
- AI classification is advisory and never blocks issue submission
"""

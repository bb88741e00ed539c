"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: records handed back by the repository
- Schemas: API contract (what client sends/receives)
"""

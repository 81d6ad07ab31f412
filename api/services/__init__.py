"""Service layer shared by every entity router.

Layer hierarchy:
    Routes (HTTP) -> Services (validation, result handling) -> Repositories (MongoDB)

Services should:
- Enforce the required-field rules before anything reaches the store
- Turn repository ``Result`` values into plain values or boundary errors

Services should NOT:
- Query MongoDB directly (use repositories)
- Build HTTP responses (routes do that)
"""

from services.results_service import unwrap
from services.validation_service import RequiredField, is_blank, validate_required

__all__ = [
    "RequiredField",
    "is_blank",
    "unwrap",
    "validate_required",
]

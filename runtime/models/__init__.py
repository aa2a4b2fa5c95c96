"""
Pydantic / datamodels used by the Oracle runtime.

Split into:
- session_models: Session + SessionStatus + transcript (de)serialization
- api_models: HTTP request/response schemas
"""

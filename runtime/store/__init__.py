"""
Storage abstractions for the Oracle runtime.

Includes:
- SessionStore: in-memory, session-scoped attribute storage
"""

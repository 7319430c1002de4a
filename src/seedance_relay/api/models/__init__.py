"""
Pydantic models for API request/response schemas.

These are kept apart from the provider-level dataclasses so the HTTP contract
stays stable when the remote API changes.
"""

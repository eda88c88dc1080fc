"""Pydantic schemas: field payloads (what a client may write) and responses (what the API returns)."""

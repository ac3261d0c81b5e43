"""
Pydantic schema definitions for API payloads.

Request bodies, response records and the common response envelope
live here, separate from the store so the API representation stays
decoupled from how records are held in memory.
"""

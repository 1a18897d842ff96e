"""
Pydantic schema definitions for API payloads.

Schemas describe the request and response bodies exchanged over HTTP.
They are kept separate from the service layer so the representation
on the wire can evolve independently of how recipes are stored.
"""

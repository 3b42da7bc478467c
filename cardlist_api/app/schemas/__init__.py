"""
Pydantic schema definitions for API payloads.

Cards and lists each define their own models for request and response
bodies.  Schemas are separated from the stored records to decouple the
API representation from storage.
"""

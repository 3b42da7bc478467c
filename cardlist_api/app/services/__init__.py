"""
Service layer abstraction.

Each service encapsulates the business logic for one collection.
``CardService`` and ``ListService`` own their records and know nothing
about each other; ``IntegrityService`` composes them and is the only
place where card and list operations are coordinated.  All services
share a single ``MemoryStore`` passed in at construction.
"""

"""
Service layer abstraction.

Each service encapsulates domain logic between the API handlers and
the document store, so routes never touch storage directly.
"""

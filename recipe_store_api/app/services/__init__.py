"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Handlers in
``api`` only translate between HTTP and service calls.
"""

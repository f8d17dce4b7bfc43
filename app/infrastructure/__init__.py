"""Infrastructure Layer — database engine and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Database failures surface as DatabaseError, never raw driver exceptions

Design Decisions:
    - Thin wrappers over SQLAlchemy and logging; no business rules here
"""

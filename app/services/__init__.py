"""Services Layer — database-bound operations behind the API routes.

Invariants:
    - Services receive an AsyncSession and explicit caller context; never a Request
    - Services raise PlacesError subclasses; status mapping happens in api/

Design Decisions:
    - One service class per aggregate (ADR: no god objects)
"""

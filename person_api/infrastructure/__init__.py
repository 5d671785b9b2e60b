"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Database failures mapped to DatabaseError before leaving this layer
"""

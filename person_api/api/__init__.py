"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All person endpoints return the {success, result, message} envelope

Design Decisions:
    - Thin routes delegate persistence to services/ through core protocols
"""

"""Person API Package — REST resource for people joined with their companies.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

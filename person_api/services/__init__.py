"""Services Layer — IO implementations of the core boundary protocols.

Invariants:
    - Services own all SQL; routes never build queries
    - Each service is constructed per request with the request's session
"""

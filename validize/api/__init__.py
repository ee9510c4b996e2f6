"""API Layer: dispatcher, FastAPI adapter, routes and error handlers.

Invariants:
    - Routers registered explicitly in main.py (no auto-discovery)
    - Every failure response has an empty body

Design Decisions:
    - Dispatcher is HTTP-framework agnostic; routes.py is the only FastAPI seam for it
"""

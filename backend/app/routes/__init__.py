# Routes package init
"""
Userbase Backend — API Routes Package
=======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - users.py:   POST   /api/users          (create)
                  GET    /api/users          (list)
                  GET    /api/users/{id}     (get one)
                  PUT    /api/users/{id}     (replace)
                  DELETE /api/users/{id}     (delete)
    - health.py:  GET /health, GET /info, GET /metrics

Design Principle:
    Routes are THIN: they bind HTTP to a service call and pick the status
    code. Business logic belongs in services, validation in app/validation.py.
"""

# Services package init
"""
Userbase Backend — Services Package
=====================================

What:  Business logic layer independent of HTTP concerns.
Why:   Services can be tested without HTTP and reused from any entry point.

Service Inventory:
    - user_service.py: UserService (CRUD orchestration, not-found handling)
"""

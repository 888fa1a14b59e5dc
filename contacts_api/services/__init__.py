"""
Use cases for the contacts API.

Services orchestrate repositories and enforce the contact/fund rules.
Routers call these services and never open database sessions themselves.
Every service method returns a ``ServiceResult`` instead of raising.
"""

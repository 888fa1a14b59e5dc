"""
Persistence adapters.

Each repository wraps SQLAlchemy sessions for one table and only checks that
rows exist. Relationship rules live in the services, which depend on the
interfaces in ``ports`` rather than on these classes.
"""

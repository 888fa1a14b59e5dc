"""
FastAPI routers grouped by domain (contacts, funds).

Each module exposes an APIRouter included by ``contacts_api.app`` under the
configured prefix. Routers only validate input and turn service results into
envelopes.
"""

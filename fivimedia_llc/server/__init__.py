"""
FiviMedia LLC Formation server.

FastAPI application exposing the public ordering API and the admin back
office. Run it with ``uvicorn fivimedia_llc.server.main:app`` or the
``fivimedia-server`` console script.
"""

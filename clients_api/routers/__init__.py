"""
FastAPI routers grouped by resource.

Each module exposes an APIRouter included by the app factory (app.py).
"""

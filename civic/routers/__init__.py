"""
FastAPI routers grouped by entity kind (issues, announcements, events, discussions).

Each module exposes an APIRouter included by the application factory. Every
router reaches the store through the CommunityService kept on app.state.
"""

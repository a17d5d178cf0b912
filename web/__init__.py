"""
Web application package for the chess tournament map.

Provides a FastAPI JSON API over the render pipeline and the Leaflet page that
draws its output. Run with `uvicorn web.app:app`.
"""

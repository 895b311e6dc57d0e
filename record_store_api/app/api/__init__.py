"""
API package containing dependency providers and versioned routes.

``deps`` builds repositories and services from the database stored on
``app.state``; ``v1`` exposes the routers.
"""

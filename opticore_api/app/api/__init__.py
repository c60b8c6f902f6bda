"""
API package containing the HTTP routes.

``router.py`` aggregates the per‑domain routers found in ``endpoints``;
``deps.py`` provides the services bound to the running application.
"""

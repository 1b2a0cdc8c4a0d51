"""Web front end: FastAPI app, routers and HTML rendering."""

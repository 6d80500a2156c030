"""
WSGI compatibility layer.

Wraps the ASGI FastAPI application for deployment on WSGI servers
such as Gunicorn or Waitress. Prefer ASGI deployment when possible:
the ASGI lifespan (which opens the document store) is not driven by
WSGI servers, so the store is opened here explicitly.
"""

import atexit

from a2wsgi import ASGIMiddleware

from app.core.config import settings
from app.infrastructure.blogging.mongo_store import MongoStore
from app.main import app

_store = MongoStore(
    uri=settings.mongo_uri,
    database=settings.mongo_db,
    timeout_ms=settings.mongo_timeout_ms,
).open()
app.state.store = _store
atexit.register(_store.close)

# Expose a WSGI-compatible app object for WSGI servers (gunicorn, waitress, etc.)
application = ASGIMiddleware(app)

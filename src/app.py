"""RillTech FastAPI application.

Serves user registration and the admin notification inbox. Registering a
user raises UserCreated; the notifications event handler queues the welcome
job within the same unit of work.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share it. DATABASE_URL picks
# the store, QUEUE_CONNECTION the job queue.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from shared.domain import init_domain, rilltech
from shared.utils.logging import add_context, clear_context, configure_logging, get_logger

configure_logging()
init_domain()

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="RillTech API",
    description="User registration and admin notifications",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the domain context and tag log lines with the request path."""
    add_context(method=request.method, path=request.url.path)
    try:
        with rilltech.domain_context():
            return await call_next(request)
    finally:
        clear_context()


# ValidationError -> 400, ObjectNotFoundError -> 404
register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from accounts.api.routes import router as accounts_router  # noqa: E402
from notifications.api.routes import router as notifications_router  # noqa: E402

app.include_router(accounts_router)
app.include_router(notifications_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": rilltech.name})

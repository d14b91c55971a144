import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.config import settings
from marketplace.log import setup_logging
from marketplace.routers import auth, dashboard, job_requests, providers, quotes

logger = logging.getLogger("marketplace")

__version__ = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    if settings.storage_backend == "sql":
        from marketplace.database import init_db
        init_db()
        logger.info("Database ready at %s", settings.database_url)
    else:
        logger.info("Using in-memory storage; data is lost on restart.")

    if settings.seed_demo:
        from marketplace.dependencies import get_store
        from marketplace.seed import seed_demo_data
        store_gen = get_store()
        try:
            seed_demo_data(next(store_gen))
        finally:
            store_gen.close()
    yield


app = FastAPI(
    title="Labor Marketplace",
    description="Job requests, labor providers and quotes",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(job_requests.router, prefix=settings.api_prefix)
app.include_router(providers.router, prefix=settings.api_prefix)
app.include_router(quotes.router, prefix=settings.api_prefix)
app.include_router(dashboard.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.gemini.router import router as gemini_router
from api.users.router import router as users_router
from config import LOG_LEVEL
from gemini_client import close_client
from user_store import create_schema, dispose_engine, get_engine

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_schema(get_engine())
    logger.info("Startup complete")
    yield
    close_client()
    dispose_engine()
    logger.info("Shutdown complete")


app = FastAPI(title="Gemini Proxy API", version="1.0.0", lifespan=lifespan)

# the browser extension posts page text from arbitrary origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=".*",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(gemini_router)
app.include_router(users_router)

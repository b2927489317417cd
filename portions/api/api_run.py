from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging

from portions.api.routes import scaling, shopping
from portions.infra.Knowledge_Repository import load_scaling_knowledge

# Logging
logger = logging.getLogger("portions_app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read the scaling knowledge once so the first request does not pay for it."""
    knowledge = load_scaling_knowledge()
    logger.info("Scaling knowledge ready: %s", knowledge)
    yield
    logger.info("Shutting down")


# Initialize FastAPI app
app = FastAPI(title="Portions: Recipe Scaling & Shopping List API", lifespan=lifespan)

# Include routers
app.include_router(scaling.router)
app.include_router(shopping.router)


@app.get("/health")
def health():
    return {"status": "ok"}

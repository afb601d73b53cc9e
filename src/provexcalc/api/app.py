import logging

import uvicorn
from fastapi import FastAPI

from provexcalc.api.routes.estimate import router as estimate_router
from provexcalc.api.routes.health import router as health_router
from provexcalc.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(title="ProveX Sacrifice Calculator API", version="0.1.0")
app.include_router(health_router)
app.include_router(estimate_router)


def run() -> None:
    logger.info("Starting API on %s:%s", settings.app_host, settings.app_port)
    uvicorn.run("provexcalc.api.app:app", host=settings.app_host, port=settings.app_port, reload=False)

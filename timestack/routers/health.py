import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from timestack.database import check_connection
from timestack.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    database = "ok"
    try:
        await run_in_threadpool(check_connection, request.app.state.engine)
    except Exception as exc:
        logger.warning("Database health check failed: %s", exc)
        database = "unreachable"

    redis = "ok"
    try:
        await request.app.state.redis.ping()
    except Exception as exc:
        logger.warning("Redis health check failed: %s", exc)
        redis = "unreachable"

    healthy = database == "ok" and redis == "ok"
    body = HealthResponse(status="ok" if healthy else "degraded", database=database, redis=redis)
    return JSONResponse(status_code=200 if healthy else 503, content=body.model_dump())

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from timestack.config import Settings, get_settings, settings
from timestack.database import check_connection, engine
from timestack.exceptions import (
    RecordNotFoundError,
    WorkspaceMismatchError,
    WorkspaceNotFoundError,
)
from timestack.integrations.github import GithubGraphqlService
from timestack.resolvers.schema import create_graphql_router
from timestack.utils.logger import configure_logging
from timestack.utils.redis_service import RedisService, create_redis_config

#routers
from timestack.routers import health, task, user, workspace

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Server startup (%s)", settings.environment)

    # 1. PostgreSQL: only check that it answers, the schema comes from migrations
    check_connection(app.state.engine)

    # 2. Redis
    await app.state.redis.start()

    # 3. integrations
    app.state.github.start()

    logger.info("Server ready on port %s", settings.server_port)
    yield

    logger.info("Server shutting down")
    app.state.github.stop()
    await app.state.redis.stop()
    app.state.engine.dispose()


app = FastAPI(
    title="Timestack",
    description="Time tracking backend: clients, projects, tasks and tags per workspace",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.engine = engine
app.state.redis = RedisService(create_redis_config(settings))
app.state.github = GithubGraphqlService(settings)


# constraint violations are passed through as-is
@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": str(exc.orig)})


@app.exception_handler(WorkspaceNotFoundError)
@app.exception_handler(RecordNotFoundError)
async def not_found_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(WorkspaceMismatchError)
async def bad_request_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


#routers
prefix = f"/{settings.global_prefix}"
api = APIRouter(prefix=prefix)
api.include_router(health.router)
api.include_router(user.router)
api.include_router(workspace.router)
api.include_router(task.router)

app.include_router(api)
app.include_router(create_graphql_router(), prefix=f"{prefix}/graphql")


@app.get("/")
def read_root(config: Settings = Depends(get_settings)):
    return {
        "message": "Timestack API Server is Running!",
        "environment": config.environment,
        "graphql": f"{config.server_url}{prefix}/graphql",
    }

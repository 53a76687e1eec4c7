from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Final, Any, AsyncIterator, Dict, Optional

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from motor.motor_asyncio import AsyncIOMotorClient
from strawberry.fastapi import GraphQLRouter

# Local application imports
from application.user.handlers import register_user_handlers
from graphql_api.context import GraphQLContext, create_context
from graphql_api.schema import create_schema
from infrastructure.config import get_bcrypt_rounds, get_user_repository_backend
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.user.bcrypt_password_hasher import BcryptPasswordHasher
from infrastructure.user.repository_factory import (
    UserRepositories,
    create_mongo_client,
    create_user_repositories,
)

load_dotenv()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Version from env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")

schema = create_schema()

__all__: list[str] = ["app", "schema"]

# Process-wide singletons; repositories are (re)built by the lifespan
_event_bus = InMemoryEventBus()
register_user_handlers(_event_bus)
_password_hasher = BcryptPasswordHasher(rounds=get_bcrypt_rounds())
_repositories: Optional[UserRepositories] = None


def get_repositories() -> UserRepositories:
    """Current repositories, built from USER_REPOSITORY on first use.

    The lifespan normally sets them; the lazy path only covers
    in-memory setups where the lifespan did not run.
    """
    global _repositories
    if _repositories is None:
        _repositories = create_user_repositories()
    return _repositories


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle manager.

    STARTUP: select the repository backend; for mongodb create the
    single motor client, build the repositories on it and ensure the
    unique email index. SHUTDOWN: close the client.
    """
    global _repositories
    logger = _logging.getLogger("startup")

    backend = get_user_repository_backend()
    logger.info(
        "lifespan.startup",
        extra={"user_repository": backend, "bcrypt_rounds": _password_hasher.rounds},
    )

    client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None
    if backend == "mongodb":
        client = create_mongo_client()

    try:
        if client is not None:
            _repositories = create_user_repositories(client=client, backend=backend)
            await _repositories.ensure_indexes()
            logger.info("lifespan.mongodb_ready")
        else:
            _repositories = create_user_repositories(backend=backend)

        logger.info("lifespan.ready", extra={"status": "serving"})
        yield
    finally:
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        if client is not None:
            client.close()
        _repositories = None


app = FastAPI(
    title="Accounts Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context(request: Request) -> GraphQLContext:
    """Create GraphQL context with all dependencies."""
    repositories = get_repositories()
    return create_context(
        user_repository=repositories.users,
        account_details_repository=repositories.account_details,
        password_hasher=_password_hasher,
        event_bus=_event_bus,
        request=request,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")

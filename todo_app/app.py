#!/usr/bin/env python3
"""
Todo task REST API
"""
import argparse
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import __version__
from .config import Config
from .exceptions import StoreInvariantError
from .logging_setup import setup_logging
from .routes.api.tasks import router as tasks_router
from .service import TodoService
from .store import TaskStore

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """
    Build the FastAPI application around a single TaskStore.

    Args:
        config: Server configuration (defaults are used when omitted)
        store: Store to serve; a new empty store is created when omitted

    Returns:
        The configured FastAPI app. Its TodoService is available as app.state.service.
    """
    config = config or Config()
    store = store if store is not None else TaskStore()
    service = TodoService(store)
    if config.seed_demo_data:
        service.seed_demo_tasks()

    app = FastAPI(
        title="Todo Task API",
        description="In-memory task tracking service",
        version=__version__,
    )
    app.state.config = config
    app.state.service = service

    # FastAPI reports body validation failures as 422; clients of this API expect 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(StoreInvariantError)
    async def invariant_exception_handler(request: Request, exc: StoreInvariantError):
        logger.error("Store invariant violated during %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=500, content={"detail": "Internal error"})

    app.include_router(tasks_router)

    @app.get("/")
    def root():
        return {"message": "Todo Task API", "version": __version__}

    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run the todo task API server')
    parser.add_argument('--config', default=None, help='Path to a JSON config file')
    parser.add_argument('--host', default=None, help='Host to bind (default: 127.0.0.1)')
    parser.add_argument('--port', type=int, default=None, help='Port to run on (default: 8000)')
    parser.add_argument('--no-seed', action='store_true', help='Start with an empty task list')
    parser.add_argument('--log-level', default=None, help='Console log level (default: INFO)')
    parser.add_argument('--log-dir', default=None, help='Also write full logs to this directory')
    args = parser.parse_args(argv)

    config = Config(config_file=args.config, overrides={
        'host': args.host,
        'port': args.port,
        'seed_demo_data': False if args.no_seed else None,
        'log_level': args.log_level,
        'log_dir': args.log_dir,
    })
    setup_logging(level=config.log_level, log_dir=config.log_dir)

    app = create_app(config)
    logger.info("Starting todo API on %s:%s", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from .config import settings
from .logging_config import setup_logging
from .routers import files

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging(settings.log_level)
    # raises PathConstructionError when the root is missing or not a directory
    files.ops.open_dir('')
    logger.info('Serving files from %s', files.ops.root)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception('Unhandled error on %s', request.url.path, exc_info=exc)
    if request.url.path.startswith('/api/'):
        return JSONResponse({'detail': 'Internal server error. Please try again.'}, status_code=500)
    return HTMLResponse('<h1>Unexpected error</h1>', status_code=500)


@app.get('/healthz')
def healthz():
    return {'ok': True}


app.include_router(files.router)

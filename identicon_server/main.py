import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .routes import identicon as identicon_routes
from .core.config import get_settings
from .core.errors import MethodNotAllowed, RequestError

"""Identicon HTTP service

Every GET path is an identicon name: /alice.png, /bob.ico?size=7&pad=4
Run from the repository root:
    uvicorn identicon_server.main:app --port 8000
"""

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Identicon API", version="0.1.0")

origins = [o.strip() for o in settings.allowed_origins.split(',')]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["X-Recommended-Size"],
)

@app.exception_handler(RequestError)
async def request_error_handler(request: Request, exc: RequestError):
    logger.info("%s %s rejected (%d): %s", request.method, request.url.path, exc.status_code, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code, headers=exc.headers)

# The router only answers GET; every other method lands here, HEAD included
@app.exception_handler(StarletteHTTPException)
async def method_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return await request_error_handler(request, MethodNotAllowed())
    return await http_exception_handler(request, exc)

app.include_router(identicon_routes.router)

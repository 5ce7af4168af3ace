"""Slim entry point – wires up the routers, CORS and logging."""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
import argparse
import logging
import uvicorn

from config import HOST, PORT, CORS_ORIGINS, CORS_METHODS, LOG_LEVEL, LOG_FORMAT, API_TITLE
from routes.public import router as public_router
from routes.polar import router as polar_router

# ── Logging ──
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)


# ── Lifecycle ──
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{API_TITLE} ready (CORS origins: {', '.join(CORS_ORIGINS)})")
    yield


app = FastAPI(title=API_TITLE, lifespan=lifespan)

# ── Route routers ──
app.include_router(public_router)
app.include_router(polar_router)

# ── CORS ──
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=CORS_METHODS,
    allow_headers=["*"],
)


def main():
    parser = argparse.ArgumentParser(description=API_TITLE)
    parser.add_argument('--host', type=str, default=HOST, help=f'Host address (default: {HOST})')
    parser.add_argument('--port', type=int, default=PORT, help=f'Port number (default: {PORT})')
    parser.add_argument('--reload', action='store_true', help='Reload on code changes (development)')
    args = parser.parse_args()

    logger.info(f"🚀 Backend running at http://{args.host}:{args.port}")
    if args.reload:
        uvicorn.run("server:app", host=args.host, port=args.port, reload=True)
    else:
        uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()

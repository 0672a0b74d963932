import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from goalsheet.config import STATIC_DIR, LOG_LEVEL
from goalsheet.errors import GoalSheetError, UpstreamError
from goalsheet.routers import goals

logger = logging.getLogger(__name__)

UPSTREAM_ERROR_MESSAGE = "Error fetching goals from Google Sheets."


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=LOG_LEVEL)
    yield


app = FastAPI(title="Goal Lookup", lifespan=lifespan)


@app.exception_handler(GoalSheetError)
async def goal_sheet_error_handler(request: Request, exc: GoalSheetError):
    if isinstance(exc, UpstreamError):
        logger.error(f"{request.url.path}: {exc.message}", exc_info=exc)
        message = UPSTREAM_ERROR_MESSAGE
    else:
        message = exc.message
    # JSON endpoints live under /goals, the rest answer in plain text
    if request.url.path.startswith("/goals"):
        return JSONResponse({"error": message}, status_code=exc.status_code)
    return PlainTextResponse(message, status_code=exc.status_code)


# --- Health check ---

@app.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"


@app.get("/")
async def index():
    """Usage page."""
    return FileResponse(STATIC_DIR / "index.html")


app.include_router(goals.router)

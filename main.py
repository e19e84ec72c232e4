import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from api.v1.router import api_router
from core.errors import ExtractionError, InvalidRequestError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
_LOG = logging.getLogger(__name__)

# echoed on every response, errors included, so the browser front end can read it
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "authorization, x-client-info, apikey, content-type, "
        "x-supabase-client-platform, x-supabase-client-platform-version, "
        "x-supabase-client-runtime, x-supabase-client-runtime-version"
    ),
}


app = FastAPI(title="FitTrack AI API", version="1.0.0")


@app.middleware("http")
async def _cors(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    try:
        response = await call_next(request)
    except Exception as exc:  # noqa: BLE001
        _LOG.exception("%s %s failed", request.method, request.url.path)
        response = JSONResponse({"error": str(exc) or "Unknown error"}, status_code=500)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(ExtractionError)
async def _extraction_error(request: Request, exc: ExtractionError) -> JSONResponse:
    if isinstance(exc, InvalidRequestError):
        _LOG.warning("%s error: %s", request.url.path, exc.message)
    else:
        _LOG.error("%s error: %s", request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"] if p != "body")
        problems.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    message = "Invalid request body: " + "; ".join(problems)
    _LOG.warning("%s %s", request.url.path, message)
    return JSONResponse({"error": message}, status_code=400)


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


app.include_router(api_router, prefix="/api/v1")


@app.get("/health", tags=["meta"])
def health() -> dict[str, str]:
    return {"status": "ok", "env": settings.env_name}

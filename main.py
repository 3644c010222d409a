from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

# Import utilities and configurations
from config import settings
from database import connect_to_mongo, close_mongo_connection, ensure_indexes
from routes import (
    auth,
    customers,
    custom_fields,
    dashboard,
    followups,
    forms,
    health,
    leads,
    orders,
    quotations,
    settings as settings_routes,
    todos,
    views,
)

# Logger setup
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI app
app = FastAPI(title="CRM API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error handling: every error body is {"error": "<message>"} ---

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _describe_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
    if error.get("type") == "missing":
        return f"Missing required field: {location}"
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "; ".join(_describe_validation_error(error) for error in errors) or "Invalid request"
    logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal Server Error"})


# Run on startup and shutdown events
@app.on_event("startup")
async def startup_event():
    await connect_to_mongo()
    await ensure_indexes()


@app.on_event("shutdown")
async def shutdown_event():
    await close_mongo_connection()


app.include_router(auth.router)
app.include_router(leads.router)
app.include_router(customers.router)
app.include_router(quotations.router)
app.include_router(orders.router)
app.include_router(followups.router)
app.include_router(todos.router)
app.include_router(settings_routes.router)
app.include_router(custom_fields.router)
app.include_router(forms.router)
app.include_router(views.router)
app.include_router(dashboard.router)
app.include_router(health.router)

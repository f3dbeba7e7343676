from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from letsgo.api.routes import auth, bookings, drink_orders, reports
from letsgo.core.config import CORS_ORIGINS
from letsgo.core.exceptions import BookingError

# ⭐ Import logging system
from letsgo.core.logging_config import get_logger

logger = get_logger()

app = FastAPI(
    title="Let's Go Workspace API",
    version="1.0.0",
    description="Room bookings, drink orders and daily reports for a shared workspace"
)


def error_response(status_code: int, message: str):
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


# ⭐ Request Logging Middleware
@app.middleware("http")
async def log_requests(request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url}")

    try:
        response = await call_next(request)
        logger.info(f"RESPONSE: {response.status_code} {request.url}")
        return response

    except Exception as e:
        logger.error(f"ERROR: {request.url} -> {str(e)}")
        raise e


# ⭐ Every failure leaves as {"success": false, "error": "..."}
@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    logger.bind(log_type="booking").warning(
        f"Rejected {request.method} {request.url.path} -> {exc.status_code} {exc.message}"
    )
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"] if part != "body")
        message = f"Invalid value for '{field}': {first['msg']}" if field else first["msg"]
    else:
        message = "Invalid request"
    return error_response(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Something went wrong, please try again")


# ⭐ CORS (important for frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(bookings.router)
app.include_router(drink_orders.router)
app.include_router(reports.router)


@app.get("/", tags=["Root"])
def root():
    return {"success": True, "message": "Backend running successfully"}

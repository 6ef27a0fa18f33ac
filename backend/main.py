# backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from database import init_db
from utils.errors import LedgerError, StorageError, ValidationError
from utils.logging_setup import configure_logging

# Routers (importing them registers every model on Base.metadata)
from routes.products import router as products_router
from routes.purchase_orders import router as purchase_orders_router
from routes.sales import router as sales_router
from routes.dues import router as dues_router
from routes.sellers import router as sellers_router
from routes.reports import router as reports_router

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready")
    yield


app = FastAPI(title=settings.APP_TITLE, version="1.0.0", lifespan=lifespan)

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
]
if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error rendering: every failure leaves as {success, kind, message, field, details}
@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    content = {
        "success": False,
        "kind": "ValidationError",
        "message": "Validation failed",
        "field": errors[0]["field"] if errors else None,
        "details": {"errors": errors},
    }
    return JSONResponse(status_code=400, content=content)


@app.exception_handler(OverflowError)
async def overflow_handler(request: Request, exc: OverflowError):
    # Ids in the path skip the schemas; a value past the INTEGER range fails at the driver
    logger.warning("Out of range number on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content=ValidationError("Number out of range").to_dict())


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Unhandled database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=StorageError("Database operation failed").to_dict())


# Router registration
app.include_router(products_router)
app.include_router(purchase_orders_router)
app.include_router(sales_router)
app.include_router(dues_router)
app.include_router(sellers_router)
app.include_router(reports_router)


@app.get("/")
def read_root():
    return {"message": "Stock Ledger API is running"}

"""FastAPI application entry point."""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.api.handlers import (
    general_exception_handler,
    loan_validation_handler,
    request_validation_handler,
)
from src.api.routes import calc
from src.config import settings
from src.engine.errors import ValidationError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mortgage Amortizer",
    description="Fixed-rate amortization schedules with extra principal payments",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ValidationError, loan_validation_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(calc.router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("%s %s %d %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response

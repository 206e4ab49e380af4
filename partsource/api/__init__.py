"""Part source API: read-only access to the categories and parts of a part directory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from partsource.api.parts import app_parts
from partsource.errors import PartNotFound, PartSourceIOError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="partsource",
    description=__doc__ if __doc__ else "",
    openapi_tags=[
        dict(name="parts", description="Endpoints to list categories and part names, and to read parts"),
    ],
)
app.include_router(app_parts)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.exception_handler(PartNotFound)
async def part_not_found_exception_handler(request: Request, exc: PartNotFound):
    return JSONResponse(
        status_code=404,
        content={"message": str(exc)},
    )


@app.exception_handler(PartSourceIOError)
async def part_source_exception_handler(request: Request, exc: PartSourceIOError):
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={"message": str(exc)},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc) -> JSONResponse:
    return JSONResponse(
        status_code=422, content={"message": "There was an issue with the data you sent.", "fields_invalid": exc.errors()}
    )

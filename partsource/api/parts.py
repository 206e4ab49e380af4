"""API Endpoints for listing and reading parts."""

import functools
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import Response
from pydantic import BaseModel, Field

from partsource.config import get_settings
from partsource.names import split_part_name
from partsource.source import DirLibSource

app_parts = APIRouter(tags=["parts"])


@functools.lru_cache()
def _build_source(root_path: str, options: str, max_part_size: int) -> DirLibSource:
    return DirLibSource(root_path, options, max_part_size=max_part_size)


def get_source() -> DirLibSource:
    """Dependency returning the part source configured in the settings, built once per process"""
    settings = get_settings()
    if not settings.root_path:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="No part directory configured, set PARTSOURCE_ROOT_PATH",
        )
    return _build_source(settings.root_path, settings.options, settings.max_part_size)


Source = Annotated[DirLibSource, Depends(get_source)]


# RESPONSE MODELS
class CategoriesResponse(BaseModel):
    categories: list[str] = Field(..., description="The categories, in alphabetical order.")


class PartInfo(BaseModel):
    name: str = Field(..., description="The full part name, [category/]basename[/revN].")
    category: str = Field(..., description="The category of the part, empty if uncategorized.")
    basename: str = Field(..., description="The name of the part within its category.")
    revision: int | None = Field(None, description="The revision number, if the source is versioned.")


class PartListResponse(BaseModel):
    parts: list[PartInfo] = Field(..., description="Part names, grouped per part with the newest revision first.")


class PartContent(BaseModel):
    name: str = Field(..., description="The part name as requested.")
    content: str = Field(
        ...,
        description=(
            "The part contents decoded as UTF-8. Invalid bytes are replaced by U+FFFD; "
            "use GET /parts/{part_name} for the unchanged bytes."
        ),
    )


class PartContentResponse(BaseModel):
    parts: list[PartContent]


def _part_info(name: str) -> PartInfo:
    category, basename, revision = split_part_name(name)
    return PartInfo(name=name, category=category, basename=basename, revision=revision)


@app_parts.get("/categories")
def get_categories(source: Source) -> CategoriesResponse:
    """List the categories of the part source."""
    return CategoriesResponse(categories=source.get_categories())


@app_parts.get("/parts")
def get_part_names(
    source: Source,
    category: Annotated[str, Query(description="Only list parts in this category")] = "",
) -> PartListResponse:
    """List part names, optionally limited to one category."""
    return PartListResponse(parts=[_part_info(name) for name in source.get_categorical_part_names(category)])


@app_parts.post("/parts/read")
def read_parts(
    source: Source,
    names: Annotated[list[str], Body(embed=True, description="Part names (including any /revN) to read")],
) -> PartContentResponse:
    """Read several parts at once. If any part cannot be read, nothing is returned."""
    payloads = source.read_parts(names)
    return PartContentResponse(
        parts=[
            PartContent(name=name, content=payload.decode("utf-8", errors="replace"))
            for name, payload in zip(names, payloads)
        ]
    )


@app_parts.get("/parts/{part_name:path}")
def read_part(
    source: Source,
    part_name: str,
    rev: Annotated[str, Query(description="Revision to read, e.g. rev3")] = "",
):
    """Read the contents of a single part."""
    return Response(content=source.read_part(part_name, rev), media_type="text/plain")

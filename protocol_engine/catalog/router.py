"""
Catalog Endpoints

GET /api/v1/catalog/ailments                 - List/filter/search ailments
GET /api/v1/catalog/ailments/{ailment_id}    - One ailment
GET /api/v1/catalog/categories               - Categories with ailment counts
GET /api/v1/catalog/protocols                - List/filter protocols
GET /api/v1/catalog/protocols/{protocol_id}  - One protocol

Version: catalog_v1
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from .ailments import AILMENT_CATALOG
from .models import Ailment, AilmentCategory, AilmentCategoryInfo, Intensity, Protocol, ProtocolType, Region
from .protocols import PROTOCOL_CATALOG

router = APIRouter(
    prefix="/api/v1/catalog",
    tags=["catalog"],
)


class AilmentListResponse(BaseModel):
    success: bool = True
    count: int
    ailments: List[Ailment]


class CategorySummary(BaseModel):
    category: AilmentCategoryInfo
    ailment_count: int
    ailment_ids: List[str]


class CategoryListResponse(BaseModel):
    success: bool = True
    count: int
    categories: List[CategorySummary]


class ProtocolListResponse(BaseModel):
    success: bool = True
    count: int
    protocols: List[Protocol]


@router.get("/ailments", response_model=AilmentListResponse)
async def list_ailments(
    category: Optional[AilmentCategory] = None,
    q: Optional[str] = Query(default=None, description="Matches name, description or any symptom"),
):
    ailments = AILMENT_CATALOG.search(q) if q else AILMENT_CATALOG.all()
    if category is not None:
        ailments = [a for a in ailments if a.category == category]
    return AilmentListResponse(count=len(ailments), ailments=ailments)


@router.get("/ailments/{ailment_id}", response_model=Ailment)
async def get_ailment(ailment_id: str):
    ailment = AILMENT_CATALOG.lookup(ailment_id)
    if ailment is None:
        raise HTTPException(status_code=404, detail=f"Ailment not found: {ailment_id}")
    return ailment


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories():
    summaries = [
        CategorySummary(
            category=info,
            ailment_count=len(ailments),
            ailment_ids=[a.id for a in ailments],
        )
        for info, ailments in AILMENT_CATALOG.categories()
    ]
    return CategoryListResponse(count=len(summaries), categories=summaries)


@router.get("/protocols", response_model=ProtocolListResponse)
async def list_protocols(
    intensity: Optional[Intensity] = None,
    protocol_type: Optional[ProtocolType] = Query(default=None, alias="type"),
    region: Optional[Region] = None,
    ailment: Optional[List[str]] = Query(default=None, description="Target ailment tags (any match)"),
):
    """Filters combine with AND; each keeps catalog order."""
    protocols = PROTOCOL_CATALOG.all()
    if intensity is not None:
        keep = {p.id for p in PROTOCOL_CATALOG.by_intensity(intensity)}
        protocols = [p for p in protocols if p.id in keep]
    if protocol_type is not None:
        keep = {p.id for p in PROTOCOL_CATALOG.by_type(protocol_type)}
        protocols = [p for p in protocols if p.id in keep]
    if region is not None:
        keep = {p.id for p in PROTOCOL_CATALOG.by_region(region)}
        protocols = [p for p in protocols if p.id in keep]
    if ailment:
        keep = {p.id for p in PROTOCOL_CATALOG.by_target_ailments(ailment)}
        protocols = [p for p in protocols if p.id in keep]
    return ProtocolListResponse(count=len(protocols), protocols=protocols)


@router.get("/protocols/{protocol_id}", response_model=Protocol)
async def get_protocol(protocol_id: str):
    protocol = PROTOCOL_CATALOG.lookup(protocol_id)
    if protocol is None:
        raise HTTPException(status_code=404, detail=f"Protocol not found: {protocol_id}")
    return protocol

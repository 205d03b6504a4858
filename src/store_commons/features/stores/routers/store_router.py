"""Store router with CRUD operations.

Provides a ready-to-use FastAPI router for the store directory. Services
include it and override get_store_service.
"""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from ....core.exceptions import StoreCommonsError, StoreNotFoundError, get_http_status_code
from ..models.requests import CreateStoreRequest, UpdateStoreRequest
from ..models.responses import StoreListResponse, StoreResponse
from ..services.store_service import StoreService
from .dependencies import get_store_service


router = APIRouter(
    prefix="/stores",
    tags=["Stores"],
    responses={
        404: {"description": "Store not found"},
        422: {"description": "Validation error"},
        500: {"description": "Internal server error"}
    }
)


def _raise_http_error(error: StoreCommonsError) -> NoReturn:
    raise HTTPException(
        status_code=get_http_status_code(error),
        detail=error.message
    )


@router.get(
    "",
    response_model=StoreListResponse,
    summary="List stores",
    description="List all stores ordered by display order"
)
async def list_stores(
    service: StoreService = Depends(get_store_service)
) -> StoreListResponse:
    """List all stores."""
    try:
        stores = await service.get_all_stores()
    except StoreCommonsError as e:
        _raise_http_error(e)
    return StoreListResponse.from_entities(stores)


@router.get(
    "/by-discount/{discount_id}",
    response_model=StoreListResponse,
    summary="List stores by discount",
    description="List stores that have the discount applied"
)
async def list_stores_by_discount(
    discount_id: str = Path(..., description="Discount ID"),
    service: StoreService = Depends(get_store_service)
) -> StoreListResponse:
    """List stores with a discount applied."""
    try:
        stores = await service.get_all_stores_by_discount(discount_id)
    except StoreCommonsError as e:
        _raise_http_error(e)
    return StoreListResponse.from_entities(stores)


@router.get(
    "/{store_id}",
    response_model=StoreResponse,
    summary="Get store by ID",
    responses={
        200: {"description": "Store found"},
        404: {"description": "Store not found"}
    }
)
async def get_store(
    store_id: str = Path(..., description="Store ID"),
    service: StoreService = Depends(get_store_service)
) -> StoreResponse:
    """Get store by ID."""
    try:
        store = await service.get_store_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)
    except StoreCommonsError as e:
        _raise_http_error(e)
    return StoreResponse.from_entity(store)


@router.post(
    "",
    response_model=StoreResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create store",
    responses={
        201: {"description": "Store created successfully"},
        409: {"description": "Store with ID already exists"}
    }
)
async def create_store(
    request: CreateStoreRequest,
    service: StoreService = Depends(get_store_service)
) -> StoreResponse:
    """Create new store."""
    try:
        store = await service.insert_store(request.to_entity())
    except StoreCommonsError as e:
        _raise_http_error(e)
    return StoreResponse.from_entity(store)


@router.put(
    "/{store_id}",
    response_model=StoreResponse,
    summary="Replace store",
    responses={
        200: {"description": "Store updated"},
        404: {"description": "Store not found"}
    }
)
async def update_store(
    request: UpdateStoreRequest,
    store_id: str = Path(..., description="Store ID"),
    service: StoreService = Depends(get_store_service)
) -> StoreResponse:
    """Replace store fields."""
    try:
        existing = await service.get_store_by_id(store_id)
        if existing is None:
            raise StoreNotFoundError(store_id)
        store = await service.update_store(request.apply_to(existing))
    except StoreCommonsError as e:
        _raise_http_error(e)
    return StoreResponse.from_entity(store)


@router.delete(
    "/{store_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete store",
    responses={
        204: {"description": "Store deleted"},
        404: {"description": "Store not found"},
        409: {"description": "Store is the only configured store"}
    }
)
async def delete_store(
    store_id: str = Path(..., description="Store ID"),
    service: StoreService = Depends(get_store_service)
) -> Response:
    """Delete store."""
    try:
        store = await service.get_store_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)
        await service.delete_store(store)
    except StoreCommonsError as e:
        _raise_http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Product catalogue endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from supabase import Client

from ...config import settings
from ...data.products_repository import get_product, list_categories, list_products
from ...models.domain import Product
from ...schemas.catalogue import CategoryModel, ProductListResponse, ProductModel
from ..deps import get_backend_client

router = APIRouter(prefix="/products", tags=["products"])


def _to_model(product: Product) -> ProductModel:
    return ProductModel(
        id=product.product_id,
        name=product.name,
        category=product.category,
        description=product.description,
        price=product.price,
        pricing=product.pricing,
        stock=product.stock,
        warranty=product.warranty,
        specifications=product.specifications,
    )


@router.get("", response_model=ProductListResponse, status_code=status.HTTP_200_OK)
def get_products(
    search: str | None = Query(default=None, description="Case-insensitive product name filter"),
    category: str | None = Query(default=None, description="Optional category filter"),
    page: int = Query(default=1, ge=1, description="1-based page index for pagination"),
    page_size: int | None = Query(default=None, ge=1, le=500, description="Maximum number of records per page"),
    client: Client = Depends(get_backend_client),
) -> ProductListResponse:
    effective_page_size = page_size or settings.product_page_size
    products, total = list_products(client, page=page, per_page=effective_page_size, search=search, category=category)
    offset = (page - 1) * effective_page_size
    return ProductListResponse(
        items=[_to_model(product) for product in products],
        page=page,
        page_size=effective_page_size,
        total=total,
        has_next_page=(offset + len(products)) < total,
    )


@router.get("/categories", response_model=List[CategoryModel], status_code=status.HTTP_200_OK)
def get_categories(client: Client = Depends(get_backend_client)) -> List[CategoryModel]:
    return [CategoryModel(id=idx, name=name) for idx, name in enumerate(list_categories(client))]


@router.get("/{product_id}", response_model=ProductModel, status_code=status.HTTP_200_OK)
def get_product_detail(product_id: str, client: Client = Depends(get_backend_client)) -> ProductModel:
    try:
        return _to_model(get_product(client, product_id))
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

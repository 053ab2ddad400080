"""Product endpoints: CRUD, search, low stock, stock adjustment and categories."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from stockroom.api.v1.auth import require_capability
from stockroom.api.v1.deps import get_product_service
from stockroom.core.config import get_settings
from stockroom.core.errors import InvalidArgument
from stockroom.schemas.auth import CurrentUser
from stockroom.schemas.product import ProductRecord, ProductWrite, StockUpdate
from stockroom.services.products import ProductService

router = APIRouter()

Products = Annotated[ProductService, Depends(get_product_service)]


def _bad_request(e: InvalidArgument) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


def _not_found(product_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Product {product_id} not found",
    )


@router.get("", response_model=list[ProductRecord])
def list_products(
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("view_products"))],
) -> list[ProductRecord]:
    return products.get_all_products()


# Fixed paths are registered before /{product_id} so they are not parsed as ids.
@router.get("/search", response_model=list[ProductRecord])
def search_products_by_name(
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("search_products"))],
    name: str = Query("", description="Case-insensitive name fragment"),
) -> list[ProductRecord]:
    try:
        return products.search_by_name(name)
    except InvalidArgument as e:
        raise _bad_request(e) from e


@router.get("/category/{category}", response_model=list[ProductRecord])
def search_products_by_category(
    category: str,
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("search_products"))],
) -> list[ProductRecord]:
    try:
        return products.search_by_category(category)
    except InvalidArgument as e:
        raise _bad_request(e) from e


@router.get("/low-stock", response_model=list[ProductRecord])
def list_low_stock_products(
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("view_low_stock"))],
    threshold: int | None = Query(None, description="Quantity ceiling; defaults to LOW_STOCK_THRESHOLD"),
) -> list[ProductRecord]:
    if threshold is None:
        threshold = get_settings().LOW_STOCK_THRESHOLD
    try:
        return products.get_low_stock_products(threshold)
    except InvalidArgument as e:
        raise _bad_request(e) from e


@router.get("/categories", response_model=list[str])
def list_categories(
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("view_categories"))],
) -> list[str]:
    return products.get_all_categories()


@router.get("/{product_id}", response_model=ProductRecord)
def get_product(
    product_id: int,
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("view_products"))],
) -> ProductRecord:
    product = products.get_product_by_id(product_id)
    if product is None:
        raise _not_found(product_id)
    return product


@router.post("", response_model=ProductRecord, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductWrite,
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("add_product"))],
) -> ProductRecord:
    product = body.to_record()
    try:
        products.add_product(product)
    except InvalidArgument as e:
        raise _bad_request(e) from e
    return product


@router.put("/{product_id}", response_model=ProductRecord)
def replace_product(
    product_id: int,
    body: ProductWrite,
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("update_product"))],
) -> ProductRecord:
    product = body.to_record(product_id)
    try:
        updated = products.update_product(product)
    except InvalidArgument as e:
        raise _bad_request(e) from e
    if not updated:
        raise _not_found(product_id)
    return product


@router.patch("/{product_id}/stock", response_model=ProductRecord)
def adjust_stock(
    product_id: int,
    body: StockUpdate,
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("update_stock"))],
) -> ProductRecord:
    try:
        updated = products.update_stock_quantity(product_id, body.quantity)
    except InvalidArgument as e:
        raise _bad_request(e) from e
    if not updated:
        raise _not_found(product_id)
    product = products.get_product_by_id(product_id)
    if product is None:
        raise _not_found(product_id)
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    products: Products,
    _user: Annotated[CurrentUser, Depends(require_capability("delete_product"))],
) -> Response:
    if not products.delete_product(product_id):
        raise _not_found(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

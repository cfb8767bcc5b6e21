# path: geojson-mock-api/app/api/routes/marketplace.py

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.deps import get_stores, require_api_key
from app.models.marketplace_models import Order, OrderInput, OrderUpdate, Product, ProductInput
from app.services.mock_store import MockStores

router = APIRouter(tags=["marketplace"])
orders_router = APIRouter(prefix="/orders", dependencies=[Depends(require_api_key)])

PRODUCT_NOT_FOUND = {404: {"description": "Product not found."}}
ORDER_NOT_FOUND = {404: {"description": "Order not found."}}


def _get_product(stores: MockStores, product_id: str) -> Product:
    product = stores.products.get(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product not found: {product_id}")
    return product


def _get_order(stores: MockStores, order_id: str) -> Order:
    order = stores.orders.get(order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Order not found: {order_id}")
    return order


# ----- Products -----
@router.get("/products", response_model=List[Product], response_model_exclude_none=True, summary="List Products")
def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    limit: int = Query(default=20, ge=0),
    offset: int = Query(default=0, ge=0),
    stores: MockStores = Depends(get_stores),
) -> List[Product]:
    products = stores.products.values()
    if category is not None:
        products = [p for p in products if p.category.lower() == category.lower()]
    if search:
        needle = search.lower()
        products = [
            p for p in products
            if needle in p.name.lower() or needle in (p.description or "").lower()
        ]
    return products[offset:offset + limit]


@router.get(
    "/products/{productId}",
    response_model=Product,
    response_model_exclude_none=True,
    responses=PRODUCT_NOT_FOUND,
    summary="Get Product Details",
)
def get_product(productId: str, stores: MockStores = Depends(get_stores)) -> Product:
    return _get_product(stores, productId)


@router.put(
    "/products/{productId}",
    response_model=Product,
    response_model_exclude_none=True,
    responses=PRODUCT_NOT_FOUND,
    summary="Update Product",
)
def update_product(productId: str, body: ProductInput, stores: MockStores = Depends(get_stores)) -> Product:
    _get_product(stores, productId)
    return stores.products.put(productId, Product(id=productId, **body.model_dump()))


@router.delete(
    "/products/{productId}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=PRODUCT_NOT_FOUND,
    summary="Delete Product",
)
def delete_product(productId: str, stores: MockStores = Depends(get_stores)) -> Response:
    if stores.products.pop(productId) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product not found: {productId}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ----- Orders -----
@orders_router.get("", response_model=List[Order], summary="List Orders")
def list_orders(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    limit: int = Query(default=20, ge=0),
    offset: int = Query(default=0, ge=0),
    stores: MockStores = Depends(get_stores),
) -> List[Order]:
    orders = stores.orders.values()
    if status_filter is not None:
        orders = [o for o in orders if o.status == status_filter]
    return orders[offset:offset + limit]


@orders_router.post(
    "",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    responses=PRODUCT_NOT_FOUND,
    summary="Create Order",
)
def create_order(body: OrderInput, stores: MockStores = Depends(get_stores)) -> Order:
    total = 0.0
    for line in body.products:
        total += _get_product(stores, line.productId).price * line.quantity

    order_id = "ORDER" + uuid.uuid4().hex[:6].upper()
    order = Order(
        id=order_id,
        customerId=body.customerId,
        orderDate=datetime.now(timezone.utc),
        products=body.products,
        totalAmount=round(total, 2),
        status="pending",
    )
    return stores.orders.put(order_id, order)


@orders_router.get("/{orderId}", response_model=Order, responses=ORDER_NOT_FOUND, summary="Get Order Details")
def get_order(orderId: str, stores: MockStores = Depends(get_stores)) -> Order:
    return _get_order(stores, orderId)


@orders_router.put("/{orderId}", response_model=Order, responses=ORDER_NOT_FOUND, summary="Update Order")
def update_order(orderId: str, body: OrderUpdate, stores: MockStores = Depends(get_stores)) -> Order:
    order = stores.orders.update(orderId, lambda o: o.model_copy(update={"status": body.status}))
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Order not found: {orderId}")
    return order


@orders_router.delete(
    "/{orderId}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=ORDER_NOT_FOUND,
    summary="Cancel Order",
)
def cancel_order(orderId: str, stores: MockStores = Depends(get_stores)) -> Response:
    if stores.orders.pop(orderId) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Order not found: {orderId}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


router.include_router(orders_router)

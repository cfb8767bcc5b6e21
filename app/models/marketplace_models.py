# path: geojson-mock-api/app/models/marketplace_models.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    id: str = Field(examples=["B00123456"])
    name: str = Field(examples=["Echo Dot (3rd Gen)"])
    description: Optional[str] = Field(default=None, examples=["Smart speaker with Alexa."])
    price: float = Field(examples=[49.99])
    category: str = Field(examples=["Electronics"])
    availability: Optional[bool] = None


class ProductInput(BaseModel):
    name: str = Field(examples=["Echo Dot (3rd Gen)"])
    description: Optional[str] = Field(default=None, examples=["Smart speaker with Alexa."])
    price: float = Field(examples=[49.99])
    category: str = Field(examples=["Electronics"])
    availability: Optional[bool] = None


class OrderLine(BaseModel):
    productId: str = Field(examples=["B00123456"])
    quantity: int = Field(gt=0, examples=[2])


class Order(BaseModel):
    id: str = Field(examples=["ORDER123456"])
    customerId: str = Field(examples=["CUST78910"])
    orderDate: datetime = Field(examples=["2025-01-15T10:30:00Z"])
    products: List[OrderLine]
    totalAmount: float = Field(examples=[99.98])
    status: str = Field(examples=["pending"])


class OrderInput(BaseModel):
    customerId: str = Field(examples=["CUST78910"])
    products: List[OrderLine] = Field(min_length=1)


class OrderUpdate(BaseModel):
    status: str = Field(examples=["shipped"])

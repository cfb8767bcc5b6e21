# path: geojson-mock-api/app/models/petstore_models.py

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


PetStatus = Literal["available", "pending", "sold"]


class Category(BaseModel):
    id: Optional[int] = Field(default=None, examples=[1])
    name: Optional[str] = Field(default=None, examples=["Dogs"])


class Tag(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None


class Pet(BaseModel):
    id: Optional[int] = Field(default=None, examples=[10])
    name: str = Field(examples=["doggie"])
    category: Optional[Category] = None
    photoUrls: List[str]
    tags: Optional[List[Tag]] = None
    status: Optional[PetStatus] = None


class StoreOrder(BaseModel):
    id: Optional[int] = Field(default=None, examples=[10])
    petId: Optional[int] = Field(default=None, examples=[198772])
    quantity: Optional[int] = Field(default=None, examples=[7])
    shipDate: Optional[datetime] = None
    status: Optional[Literal["placed", "approved", "delivered"]] = Field(default=None, examples=["approved"])
    complete: Optional[bool] = None


class User(BaseModel):
    id: Optional[int] = Field(default=None, examples=[10])
    username: Optional[str] = Field(default=None, examples=["theUser"])
    firstName: Optional[str] = Field(default=None, examples=["John"])
    lastName: Optional[str] = Field(default=None, examples=["James"])
    email: Optional[str] = Field(default=None, examples=["john@email.com"])
    password: Optional[str] = Field(default=None, examples=["12345"])
    phone: Optional[str] = Field(default=None, examples=["12345"])
    userStatus: Optional[int] = Field(default=None, examples=[1])


class ApiResponse(BaseModel):
    code: Optional[int] = None
    type: Optional[str] = None
    message: Optional[str] = None

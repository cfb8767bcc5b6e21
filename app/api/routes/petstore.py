# path: geojson-mock-api/app/api/routes/petstore.py

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, Query, Request, Response, status

from app.api.deps import get_stores
from app.models.petstore_models import ApiResponse, Pet, PetStatus, StoreOrder, User
from app.services.mock_store import MockStores

pet_router = APIRouter(prefix="/pet", tags=["pet"])
store_router = APIRouter(prefix="/store", tags=["store"])
user_router = APIRouter(prefix="/user", tags=["user"])

PET_STATUSES = ("available", "pending", "sold")


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def _get_pet(stores: MockStores, pet_id: int) -> Pet:
    pet = stores.pets.get(pet_id)
    if pet is None:
        raise _not_found("Pet not found")
    return pet


# ----- pet -----
@pet_router.put(
    "",
    response_model=Pet,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid ID supplied"}, 404: {"description": "Pet not found"}},
    summary="Update an existing pet",
)
def update_pet(pet: Pet, stores: MockStores = Depends(get_stores)) -> Pet:
    if pet.id is None:
        raise _bad_request("Invalid ID supplied")
    _get_pet(stores, pet.id)
    return stores.pets.put(pet.id, pet)


@pet_router.post(
    "",
    response_model=Pet,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid input"}},
    summary="Add a new pet to the store",
)
def add_pet(pet: Pet, stores: MockStores = Depends(get_stores)) -> Pet:
    if pet.id is None:
        pet = pet.model_copy(update={"id": stores.pets.next_int_key()})
    return stores.pets.put(pet.id, pet)


@pet_router.get(
    "/findByStatus",
    response_model=List[Pet],
    response_model_exclude_none=True,
    summary="Finds Pets by status",
)
def find_pets_by_status(
    status_value: PetStatus = Query(default="available", alias="status"),
    stores: MockStores = Depends(get_stores),
) -> List[Pet]:
    return [p for p in stores.pets.values() if p.status == status_value]


@pet_router.get(
    "/findByTags",
    response_model=List[Pet],
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid tag value"}},
    summary="Finds Pets by tags",
)
def find_pets_by_tags(
    tags: List[str] = Query(default=[]),
    stores: MockStores = Depends(get_stores),
) -> List[Pet]:
    # Both ?tags=a&tags=b and ?tags=a,b are accepted.
    wanted = {t.strip() for raw in tags for t in raw.split(",") if t.strip()}
    if not wanted:
        raise _bad_request("Invalid tag value")
    return [
        p for p in stores.pets.values()
        if any(tag.name in wanted for tag in p.tags or [])
    ]


@pet_router.get(
    "/{petId}",
    response_model=Pet,
    response_model_exclude_none=True,
    responses={404: {"description": "Pet not found"}},
    summary="Find pet by ID",
)
def get_pet(petId: int, stores: MockStores = Depends(get_stores)) -> Pet:
    return _get_pet(stores, petId)


@pet_router.post(
    "/{petId}",
    response_model=Pet,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid input"}},
    summary="Updates a pet in the store with form data",
)
def update_pet_with_form(
    petId: int,
    name: Optional[str] = None,
    status_value: Optional[str] = Query(default=None, alias="status"),
    stores: MockStores = Depends(get_stores),
) -> Pet:
    if status_value is not None and status_value not in PET_STATUSES:
        raise _bad_request("Invalid input")
    changes = {}
    if name is not None:
        changes["name"] = name
    if status_value is not None:
        changes["status"] = status_value
    pet = stores.pets.update(petId, lambda p: p.model_copy(update=changes))
    if pet is None:
        raise _bad_request("Invalid input")
    return pet


@pet_router.delete("/{petId}", responses={400: {"description": "Invalid pet value"}}, summary="Deletes a pet")
def delete_pet(
    petId: int,
    api_key: Optional[str] = Header(default=None, convert_underscores=False),
    stores: MockStores = Depends(get_stores),
) -> Response:
    if stores.pets.pop(petId) is None:
        raise _bad_request("Invalid pet value")
    return Response(status_code=status.HTTP_200_OK)


@pet_router.post(
    "/{petId}/uploadImage",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "Pet not found"}},
    summary="uploads an image",
)
async def upload_pet_image(
    petId: int,
    request: Request,
    additionalMetadata: Optional[str] = None,
    stores: MockStores = Depends(get_stores),
) -> ApiResponse:
    _get_pet(stores, petId)
    data = await request.body()
    message = f"File uploaded, {len(data)} bytes"
    if additionalMetadata:
        message = f"additionalMetadata: {additionalMetadata}\n{message}"
    return ApiResponse(code=200, type="unknown", message=message)


# ----- store -----
@store_router.get("/inventory", response_model=Dict[str, int], summary="Returns pet inventories by status")
def get_inventory(stores: MockStores = Depends(get_stores)) -> Dict[str, int]:
    return dict(Counter(p.status for p in stores.pets.values() if p.status is not None))


@store_router.post(
    "/order",
    response_model=StoreOrder,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid input"}},
    summary="Place an order for a pet",
)
def place_order(
    order: Optional[StoreOrder] = Body(default=None),
    stores: MockStores = Depends(get_stores),
) -> StoreOrder:
    if order is None:
        raise _bad_request("Invalid input")
    if order.id is None:
        order = order.model_copy(update={"id": stores.store_orders.next_int_key()})
    if order.status is None:
        order = order.model_copy(update={"status": "placed"})
    return stores.store_orders.put(order.id, order)


@store_router.get(
    "/order/{orderId}",
    response_model=StoreOrder,
    response_model_exclude_none=True,
    responses={404: {"description": "Order not found"}},
    summary="Find purchase order by ID",
)
def get_order(orderId: int, stores: MockStores = Depends(get_stores)) -> StoreOrder:
    order = stores.store_orders.get(orderId)
    if order is None:
        raise _not_found("Order not found")
    return order


@store_router.delete(
    "/order/{orderId}",
    responses={404: {"description": "Order not found"}},
    summary="Delete purchase order by ID",
)
def delete_order(orderId: int, stores: MockStores = Depends(get_stores)) -> Response:
    if stores.store_orders.pop(orderId) is None:
        raise _not_found("Order not found")
    return Response(status_code=status.HTTP_200_OK)


# ----- user -----
@user_router.post(
    "",
    response_model=User,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid input"}},
    summary="Create user",
)
def create_user(user: Optional[User] = Body(default=None), stores: MockStores = Depends(get_stores)) -> User:
    if user is None or not user.username:
        raise _bad_request("Invalid input")
    return stores.users.put(user.username, user)


@user_router.post(
    "/createWithList",
    response_model=User,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid input"}},
    summary="Creates list of users with given input array",
)
def create_users_with_list(users: List[User] = Body(default=[]), stores: MockStores = Depends(get_stores)) -> User:
    if not users or any(not u.username for u in users):
        raise _bad_request("Invalid input")
    for user in users:
        stores.users.put(user.username, user)
    return users[-1]


@user_router.get(
    "/login",
    response_model=str,
    responses={400: {"description": "Invalid username/password supplied"}},
    summary="Logs user into the system",
)
def login_user(
    response: Response,
    username: Optional[str] = None,
    password: Optional[str] = None,
    stores: MockStores = Depends(get_stores),
) -> str:
    user = stores.users.get(username) if username else None
    if user is None or password is None or user.password != password:
        raise _bad_request("Invalid username/password supplied")
    response.headers["X-Rate-Limit"] = "5000"
    response.headers["X-Expires-After"] = "3600"
    return f"logged in user session: {user.username}"


@user_router.get("/logout", summary="Logs out current logged in user session")
def logout_user() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@user_router.get(
    "/{username}",
    response_model=User,
    response_model_exclude_none=True,
    responses={404: {"description": "User not found"}},
    summary="Get user by user name",
)
def get_user(username: str, stores: MockStores = Depends(get_stores)) -> User:
    user = stores.users.get(username)
    if user is None:
        raise _not_found("User not found")
    return user


@user_router.put("/{username}", responses={404: {"description": "User not found"}}, summary="Update user")
def update_user(
    username: str,
    user: Optional[User] = Body(default=None),
    stores: MockStores = Depends(get_stores),
) -> Response:
    if stores.users.get(username) is None:
        raise _not_found("User not found")
    if user is not None:
        new_name = user.username or username
        if new_name != username:
            stores.users.pop(username)
        stores.users.put(new_name, user.model_copy(update={"username": new_name}))
    return Response(status_code=status.HTTP_200_OK)


@user_router.delete(
    "/{username}",
    responses={404: {"description": "User not found"}},
    summary="Delete user",
)
def delete_user(username: str, stores: MockStores = Depends(get_stores)) -> Response:
    if stores.users.pop(username) is None:
        raise _not_found("User not found")
    return Response(status_code=status.HTTP_200_OK)


routers = [pet_router, store_router, user_router]

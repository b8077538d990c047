from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from DB.DB import get_ddb_instance
from DB.SweetStore import SweetStore
from Models.SearchCriteria import SearchCriteria
from Models.StockRequest import StockRequest
from Models.SweetPayload import SweetPayload
from Routes.auth import get_current_user, require_admin
from Routes.responses import success_response
from Services.inventory import InventoryService

router = APIRouter(prefix="/sweets", tags=["sweets"])

def get_db_connection():
    return get_ddb_instance()

def get_inventory_service(table=Depends(get_db_connection)) -> InventoryService:
    return InventoryService(SweetStore(table))

Service = Annotated[InventoryService, Depends(get_inventory_service)]

# GET /sweets : List every sweet sorted by name
@router.get("")
def get_all_sweets(service: Service):
    sweets = service.get_all()
    return success_response(data=[sweet.to_response() for sweet in sweets], count=len(sweets))

# GET /sweets/search?name&category&minPrice&maxPrice&inStock
@router.get("/search")
def search_sweets(
    service: Service,
    name: str | None = None,
    category: str | None = None,
    min_price: Annotated[str | None, Query(alias="minPrice")] = None,
    max_price: Annotated[str | None, Query(alias="maxPrice")] = None,
    in_stock: Annotated[str | None, Query(alias="inStock")] = None,
):
    criteria = SearchCriteria.from_query(name, category, min_price, max_price, in_stock)
    sweets = service.search(criteria)
    return success_response(data=[sweet.to_response() for sweet in sweets], count=len(sweets))

# GET /sweets/uuid
@router.get("/{sweet_id}")
def get_sweet(sweet_id: str, service: Service):
    return success_response(data=service.get_by_id(sweet_id).to_response())

# POST /sweets : Admin only
@router.post("", status_code=status.HTTP_201_CREATED)
def create_sweet(payload: SweetPayload, service: Service, user: tuple = Depends(require_admin)):
    sweet = service.create(payload.supplied_fields())
    return success_response(data=sweet.to_response())

# PUT /sweets/uuid : Admin only, any subset of fields
@router.put("/{sweet_id}")
def update_sweet(sweet_id: str, payload: SweetPayload, service: Service, user: tuple = Depends(require_admin)):
    sweet = service.update(sweet_id, payload.supplied_fields())
    return success_response(data=sweet.to_response())

# DELETE /sweets/uuid : Admin only
@router.delete("/{sweet_id}")
def delete_sweet(sweet_id: str, service: Service, user: tuple = Depends(require_admin)):
    service.delete(sweet_id)
    return success_response(message="Sweet deleted successfully")

# POST /sweets/uuid/purchase : Any authenticated user
@router.post("/{sweet_id}/purchase")
def purchase_sweet(sweet_id: str, request: StockRequest, service: Service, user: tuple = Depends(get_current_user)):
    receipt = service.purchase(sweet_id, request.quantity)
    return success_response(data=receipt.to_response(), message=receipt.message)

# POST /sweets/uuid/restock : Admin only
@router.post("/{sweet_id}/restock")
def restock_sweet(sweet_id: str, request: StockRequest, service: Service, user: tuple = Depends(require_admin)):
    receipt = service.restock(sweet_id, request.quantity)
    return success_response(data=receipt.to_response(), message=receipt.message)

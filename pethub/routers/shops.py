"""Shop router. Anyone can read the map; only admins change it."""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from sqlmodel import Session

from pethub.db.config import get_session
from pethub.middleware.auth import require_admin, CurrentUser
from pethub.schemas.shop import ShopWrite, ShopResponse
from pethub.services.shop_service import ShopService

router = APIRouter(tags=["Shops"])


def get_shop_service(session: Session = Depends(get_session)) -> ShopService:
    """Dependency for getting ShopService instance."""
    return ShopService(session)


@router.get("", response_model=List[ShopResponse])
async def list_shops(service: ShopService = Depends(get_shop_service)):
    """Shop locations for the map, newest first."""
    return service.list_shops()


@router.get("/{shop_id}", response_model=ShopResponse)
async def get_shop(shop_id: int, service: ShopService = Depends(get_shop_service)):
    shop = service.get_by_id(shop_id)
    if not shop:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shop not found")
    return shop


@router.post("", response_model=ShopResponse, status_code=status.HTTP_201_CREATED)
async def create_shop(
    shop_data: ShopWrite,
    admin: CurrentUser = Depends(require_admin),
    service: ShopService = Depends(get_shop_service),
):
    return service.create(**shop_data.model_dump())


@router.put("/{shop_id}", response_model=ShopResponse)
async def update_shop(
    shop_id: int,
    shop_data: ShopWrite,
    admin: CurrentUser = Depends(require_admin),
    service: ShopService = Depends(get_shop_service),
):
    shop = service.update(shop_id, **shop_data.model_dump())
    if not shop:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shop not found")
    return shop


@router.delete("/{shop_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shop(
    shop_id: int,
    admin: CurrentUser = Depends(require_admin),
    service: ShopService = Depends(get_shop_service),
):
    if not service.delete(shop_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shop not found")

"""Shop service for the map of pet shops and clinics."""
from sqlmodel import Session, select
from typing import List, Optional

from pethub.models.shop import Shop


class ShopService:
    """Service class for shop CRUD operations."""

    def __init__(self, session: Session):
        self.session = session

    def list_shops(self) -> List[Shop]:
        """All shops, newest first."""
        statement = select(Shop).order_by(Shop.created_at.desc(), Shop.id.desc())
        return list(self.session.exec(statement).all())

    def get_by_id(self, shop_id: int) -> Optional[Shop]:
        return self.session.get(Shop, shop_id)

    def create(self, **fields) -> Shop:
        shop = Shop(**fields)
        self.session.add(shop)
        self.session.commit()
        self.session.refresh(shop)
        return shop

    def update(self, shop_id: int, **fields) -> Optional[Shop]:
        """Replace a shop's fields. A missing image keeps the stored one."""
        shop = self.get_by_id(shop_id)
        if not shop:
            return None

        for name, value in fields.items():
            if name == "image" and value is None:
                continue
            setattr(shop, name, value)

        self.session.commit()
        self.session.refresh(shop)
        return shop

    def delete(self, shop_id: int) -> bool:
        shop = self.get_by_id(shop_id)
        if not shop:
            return False

        self.session.delete(shop)
        self.session.commit()
        return True

from pydantic import BaseModel, Field
from typing import Optional


class GiftItemCreate(BaseModel):
    event_id: str
    name: str
    description: Optional[str] = None
    price: float = Field(default=0, ge=0)
    quantity: int = Field(default=1, ge=1)
    purchased: int = Field(default=0, ge=0)
    retailer: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None


class GiftItemUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    quantity: Optional[int] = Field(default=None, ge=1)
    purchased: Optional[int] = Field(default=None, ge=0)
    retailer: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None


class GiftItemResponse(BaseModel):
    id: str
    event_id: str
    name: str
    description: Optional[str] = None
    price: float = 0
    quantity: int = 1
    purchased: int = 0
    retailer: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None

    class Config:
        from_attributes = True


class GiftPurchase(BaseModel):
    count: int = Field(default=1, ge=1)


class GiftRegistryStats(BaseModel):
    totalItems: int
    totalValue: float
    purchasedValue: float
    remainingValue: float
    totalQuantity: int
    purchasedQuantity: int
    remainingQuantity: int
    completionRate: int

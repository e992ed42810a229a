from pydantic import BaseModel


class FavoriteStatus(BaseModel):
    vendor_id: str
    is_favorite: bool

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class GalleryImageOut(BaseModel):
    id: int
    image_url: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class GalleryBulkDeleteRequest(BaseModel):
    image_ids: List[int]

from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_hotel_db as get_db
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode
from ...crud.hotel import gallery_crud as crud
from ...schemas.hotel.gallery_schemas import GalleryBulkDeleteRequest, GalleryImageOut
from ....util.file_storage import LocalFileStorage, get_file_storage

# listing is public, everything else goes through validate_current_token per route
router = APIRouter(prefix="/api/gallery", tags=["Gallery"])


@router.get("/", response_model=List[GalleryImageOut])
def get_images(db: Session = Depends(get_db)):
    return crud.get_images(db)


@router.get("/{image_id}", response_model=GalleryImageOut,
            dependencies=[Depends(validate_current_token)])
def get_image(image_id: int, db: Session = Depends(get_db)):
    return crud.get_image(db, image_id)


@router.post("/upload", response_model=GalleryImageOut, status_code=201,
             dependencies=[Depends(validate_current_token)])
async def upload_image(
    file: UploadFile = File(...),
    description: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_file_storage)
):
    return await crud.upload_image(db, storage, file, description)


@router.post("/bulk-delete", dependencies=[Depends(validate_current_token)])
def bulk_delete_images(
    request: GalleryBulkDeleteRequest,
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_file_storage)
):
    deleted = crud.bulk_delete_images(db, storage, request.image_ids)
    return success_response(
        data={"deleted": deleted},
        message="Images deleted successfully",
        status_code=AppStatusCode.OPERATION_SUCCESSFUL
    )


@router.delete("/{image_id}", dependencies=[Depends(validate_current_token)])
def delete_image(
    image_id: int,
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_file_storage)
):
    crud.delete_image(db, storage, image_id)
    return success_response(
        data=None,
        message="Image deleted successfully",
        status_code=AppStatusCode.OPERATION_SUCCESSFUL
    )

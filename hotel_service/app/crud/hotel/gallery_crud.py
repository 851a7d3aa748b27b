import logging
from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import invalid_input, not_found
from ...models.hotel.gallery_images import GalleryImage
from ...schemas.hotel.gallery_schemas import GalleryImageOut
from ....util.file_storage import LocalFileStorage

logger = logging.getLogger(__name__)


def _get_image_row(db: Session, image_id: int) -> GalleryImage:
    image = db.query(GalleryImage).filter(GalleryImage.id == image_id).first()
    if not image:
        return not_found("Image")
    return image


def _remove_file(storage: LocalFileStorage, image: GalleryImage):
    try:
        storage.delete(image.image_url)
    except OSError as exc:
        logger.warning("Could not delete file for image %s: %s", image.id, exc)


def get_images(db: Session) -> List[GalleryImageOut]:
    images = db.query(GalleryImage).order_by(GalleryImage.id.asc()).all()
    return [GalleryImageOut.model_validate(image) for image in images]


def get_image(db: Session, image_id: int) -> GalleryImageOut:
    return GalleryImageOut.model_validate(_get_image_row(db, image_id))


async def upload_image(
    db: Session,
    storage: LocalFileStorage,
    file: UploadFile,
    description: Optional[str] = None
) -> GalleryImageOut:
    if not file or not file.filename:
        return invalid_input("Image file is required")

    image_url = await storage.save(file)

    image = GalleryImage(image_url=image_url, description=description or None)
    db.add(image)
    db.commit()
    db.refresh(image)
    return GalleryImageOut.model_validate(image)


def delete_image(db: Session, storage: LocalFileStorage, image_id: int):
    image = _get_image_row(db, image_id)
    _remove_file(storage, image)

    db.delete(image)
    db.commit()


def bulk_delete_images(db: Session, storage: LocalFileStorage, image_ids: List[int]) -> int:
    """Deletes the given images, skipping ids that do not exist."""
    if not image_ids:
        return 0

    images = db.query(GalleryImage).filter(GalleryImage.id.in_(image_ids)).all()
    for image in images:
        _remove_file(storage, image)
        db.delete(image)

    db.commit()
    return len(images)

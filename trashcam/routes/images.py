# trashcam/routes/images.py
import logging
from fastapi import APIRouter, UploadFile, File, Form, HTTPException, Depends
from typing import List
from pymongo.errors import PyMongoError
from ..config import settings
from ..db import get_images_col
from ..schemas import ImageOut, UploadOut
from ..services.images import store_image, list_images
from ..services.storage import UploadTooLarge
from ..utils.validation import is_valid_username, INVALID_USERNAME_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["images"])


@router.post("/upload", status_code=201, response_model=UploadOut)
async def upload_image(name: str = Form(default=""), image: UploadFile = File(...),
                       images_col=Depends(get_images_col)):
    """
    Upload a photo for `name`. The name is checked before anything is written;
    the file and its record are stored together or not at all.
    """
    if not is_valid_username(name):
        raise HTTPException(status_code=400, detail=INVALID_USERNAME_MESSAGE)

    try:
        doc = await store_image(images_col, name, image, settings.UPLOAD_DIR)
    except UploadTooLarge:
        raise HTTPException(status_code=413, detail="Image is too large")
    except (PyMongoError, OSError):
        logger.exception("Error uploading image")
        raise HTTPException(status_code=500, detail="Failed to upload image")

    return {"message": "Image uploaded successfully", "file_path": doc["file_path"]}


@router.get("/images", response_model=List[ImageOut])
async def get_images(images_col=Depends(get_images_col)):
    try:
        return await list_images(images_col)
    except PyMongoError:
        logger.exception("Error fetching images")
        raise HTTPException(status_code=500, detail="Failed to fetch images")

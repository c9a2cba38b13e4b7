# trashcam/services/images.py
import logging
from datetime import datetime, timezone
from typing import List, Dict
from fastapi import UploadFile
from ..config import settings
from .storage import save_upload_file, remove_file

logger = logging.getLogger(__name__)

IMAGES_SORT = [("uploaded_at", -1), ("_id", -1)]


def public_path(filename: str) -> str:
    """Path of a stored file relative to the server root, matching the static mount."""
    return f"{settings.UPLOAD_URL_PREFIX.strip('/')}/{filename}"


async def store_image(images_col, username: str, upload_file: UploadFile,
                      destination_folder: str = None) -> Dict:
    """
    Write the file, then its metadata record. If the record insert fails the
    file is removed again, so a stored file always has a record.
    Callers validate `username` before calling this.
    """
    saved = await save_upload_file(upload_file, destination_folder)
    doc = {
        "username": username,
        "file_path": public_path(saved["filename"]),
        "uploaded_at": datetime.now(timezone.utc),
    }
    try:
        res = await images_col.insert_one(doc)
    except Exception:
        logger.warning("metadata insert failed, removing %s", saved["path"])
        remove_file(saved["path"])
        raise
    doc["_id"] = str(res.inserted_id)
    return doc


async def list_images(images_col) -> List[Dict]:
    cursor = images_col.find({}).sort(IMAGES_SORT)
    out = []
    async for d in cursor:
        d["_id"] = str(d["_id"])
        out.append(d)
    return out

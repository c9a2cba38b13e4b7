# trashcam/services/storage.py
import logging
import random
import time
from pathlib import Path
from typing import Optional
from fastapi import UploadFile
from ..config import settings

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class UploadTooLarge(Exception):
    pass


def make_stored_filename(original_name: Optional[str]) -> str:
    """
    `{epoch-millis}-{random 0..1e9}-{original name}`.
    Unlikely to collide, but not guaranteed unique.
    """
    base = Path(original_name or "upload").name or "upload"
    return f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}-{base}"


async def save_upload_file(upload_file: UploadFile, destination_folder: str = None,
                           max_bytes: int = None) -> dict:
    dest_root = Path(destination_folder or settings.UPLOAD_DIR)
    dest_root.mkdir(parents=True, exist_ok=True)
    if max_bytes is None:
        max_bytes = settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    filename = make_stored_filename(upload_file.filename)
    full_path = dest_root / filename

    size = 0
    try:
        with full_path.open("wb") as out_file:
            while True:
                chunk = await upload_file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    raise UploadTooLarge(f"upload exceeds {max_bytes} bytes")
                out_file.write(chunk)
    except Exception:
        remove_file(str(full_path))
        raise
    finally:
        await upload_file.close()
    return {"filename": filename, "path": str(full_path)}


def remove_file(filepath: str) -> None:
    try:
        Path(filepath).unlink(missing_ok=True)
    except OSError:
        logger.exception("could not remove %s", filepath)

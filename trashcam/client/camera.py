# trashcam/client/camera.py
import logging
from typing import List, Optional

import cv2
import numpy as np

logger = logging.getLogger(__name__)

# frame size the classifier page has always used
FRAME_WIDTH = 321
FRAME_HEIGHT = 241


class CameraError(Exception):
    pass


def resize_frame(frame: np.ndarray) -> np.ndarray:
    return cv2.resize(frame, (FRAME_WIDTH, FRAME_HEIGHT), interpolation=cv2.INTER_AREA)


def encode_jpeg(frame: np.ndarray, quality: int = 85) -> bytes:
    ok, buf = cv2.imencode(".jpg", frame, [cv2.IMWRITE_JPEG_QUALITY, quality])
    if not ok:
        raise CameraError("could not encode frame")
    return buf.tobytes()


def load_photo(path: str) -> bytes:
    """Read a photo from disk, resized and re-encoded like a webcam frame."""
    frame = cv2.imread(path, cv2.IMREAD_COLOR)
    if frame is None:
        raise CameraError(f"could not read image {path}")
    return encode_jpeg(resize_frame(frame))


def list_cameras(max_index: int = 5) -> List[int]:
    found = []
    for idx in range(max_index):
        cap = cv2.VideoCapture(idx)
        if cap.isOpened():
            found.append(idx)
        cap.release()
    return found


class Webcam:
    def __init__(self, index: int = 0):
        self.index = index
        self._cap: Optional[cv2.VideoCapture] = None

    def start(self, index: Optional[int] = None):
        # switching camera stops the previous stream first
        if index is not None and index != self.index:
            self.stop()
            self.index = index
        if self._cap is None or not self._cap.isOpened():
            self._cap = cv2.VideoCapture(self.index)
            if not self._cap.isOpened():
                self._cap = None
                raise CameraError(
                    "Error accessing webcam. Please ensure camera permissions are granted."
                )
            logger.info("webcam %d started", self.index)

    def capture(self) -> bytes:
        if self._cap is None:
            raise CameraError("Please start the webcam first!")
        ret, frame = self._cap.read()
        if not ret or frame is None:
            raise CameraError("frame capture failed")
        return encode_jpeg(resize_frame(frame))

    def stop(self):
        if self._cap is not None:
            self._cap.release()
            self._cap = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()

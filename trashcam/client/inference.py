# trashcam/client/inference.py
# Hosted classifier published Teachable Machine style: <MODEL_URL>model.json and
# <MODEL_URL>metadata.json (class labels). Frames are scored by a prediction
# endpoint answering [{"className": ..., "probability": ...}] in class order.
import logging
from typing import List, Optional

import httpx

from ..config import settings
from ..utils.scoring import Prediction

logger = logging.getLogger(__name__)


class ClassifierError(Exception):
    pass


class ImageClassifier:
    def load(self, model_url: str, metadata_url: str) -> None:
        raise NotImplementedError

    def predict(self, image_bytes: bytes) -> List[Prediction]:
        raise NotImplementedError


class RemoteClassifier(ImageClassifier):
    def __init__(self, predict_url: str = None, timeout: float = None,
                 client: Optional[httpx.Client] = None):
        self.predict_url = predict_url or settings.CLASSIFIER_PREDICT_URL
        self.timeout = timeout or settings.CLASSIFIER_TIMEOUT
        self._client = client or httpx.Client(timeout=self.timeout)
        self.labels: List[str] = []
        self._ready = False

    @classmethod
    def from_base_url(cls, base_url: str = None, **kwargs) -> "RemoteClassifier":
        base = base_url or settings.MODEL_URL
        if not base.endswith("/"):
            base += "/"
        classifier = cls(**kwargs)
        classifier.load(f"{base}model.json", f"{base}metadata.json")
        return classifier

    @property
    def total_classes(self) -> int:
        return len(self.labels)

    def load(self, model_url: str, metadata_url: str) -> None:
        try:
            self._client.get(model_url).raise_for_status()
            resp = self._client.get(metadata_url)
            resp.raise_for_status()
            labels = resp.json().get("labels") or []
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Error loading model: %s", e)
            raise ClassifierError("Failed to load model. Check the connection or model URL.") from e
        if not labels:
            raise ClassifierError("Model metadata has no class labels")
        self.labels = list(labels)
        self._ready = True
        logger.info("classifier loaded with %d classes", len(self.labels))

    def predict(self, image_bytes: bytes) -> List[Prediction]:
        if not self._ready:
            raise ClassifierError("Model is not loaded")
        try:
            resp = self._client.post(
                self.predict_url,
                files={"image": ("frame.jpg", image_bytes, "image/jpeg")},
            )
            resp.raise_for_status()
            payload = resp.json()
            preds = [Prediction(str(p["className"]), float(p["probability"])) for p in payload]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error("Error during prediction: %s", e)
            raise ClassifierError("Failed to make predictions. Please try again.") from e
        if not preds:
            raise ClassifierError("Classifier returned no predictions")
        return preds

    def close(self):
        self._client.close()

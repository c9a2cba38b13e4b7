# trashcam/client/api.py
# httpx wrapper around the trashcam backend endpoints
from pathlib import Path
from typing import List, Dict, Optional

import httpx

from ..config import settings


class BackendClient:
    def __init__(self, base_url: str = None, timeout: float = 30.0,
                 client: Optional[httpx.Client] = None):
        self.base_url = (base_url or settings.BACKEND_URL).rstrip("/")
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def get_leaderboard(self) -> List[Dict]:
        resp = self._client.get("/leaderboard")
        resp.raise_for_status()
        return resp.json()

    def add_points(self, name: str, points: int = 1) -> Dict:
        resp = self._client.post("/leaderboard", json={"name": name, "points": points})
        resp.raise_for_status()
        return resp.json()

    def upload_image(self, name: str, path: str) -> Dict:
        """Returns the response body; 400/413/500 bodies carry `error` and are returned too."""
        p = Path(path)
        with p.open("rb") as fh:
            resp = self._client.post(
                "/upload",
                data={"name": name},
                files={"image": (p.name, fh, "application/octet-stream")},
            )
        if resp.status_code >= 500:
            resp.raise_for_status()
        return resp.json()

    def list_images(self) -> List[Dict]:
        resp = self._client.get("/images")
        resp.raise_for_status()
        return resp.json()

    def close(self):
        self._client.close()

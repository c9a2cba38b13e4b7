# trashcam/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime, timezone

class PlayerOut(BaseModel):
    name: str
    points: int = 0

    model_config = ConfigDict(from_attributes=True)

class ImageOut(BaseModel):
    username: str
    file_path: str = Field(..., alias="filePath")
    uploaded_at: datetime = Field(..., alias="uploadedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @field_validator("uploaded_at")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        # stored values are UTC; naive ones come from clients without tz_aware
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

class UploadOut(BaseModel):
    message: str
    file_path: str = Field(..., alias="filePath")

    model_config = ConfigDict(populate_by_name=True)

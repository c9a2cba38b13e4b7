# trashcam/models.py
from pydantic import BaseModel, Field

# largest value BSON can store as an integer
MAX_POINTS = 2 ** 63 - 1

class LeaderboardIn(BaseModel):
    name: str = Field(..., min_length=1)
    points: int = Field(..., ge=0, le=MAX_POINTS)  # delta added to the stored score

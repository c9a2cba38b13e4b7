# trashcam/db.py
from motor.motor_asyncio import AsyncIOMotorClient
from .config import settings

_client = AsyncIOMotorClient(settings.MONGODB_URI, tz_aware=True)
db = _client[settings.DATABASE_NAME]

players_col = db["players"]
images_col = db["images"]

def get_players_col():
    return players_col

def get_images_col():
    return images_col

async def create_indexes():
    # unique name keeps concurrent upserts from creating duplicate players
    await players_col.create_index("name", unique=True)
    await players_col.create_index([("points", -1), ("name", 1)])
    await images_col.create_index([("uploaded_at", -1), ("_id", -1)])

# trashcam/services/leaderboard.py
import logging
from typing import List, Dict
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

logger = logging.getLogger(__name__)

# points desc, ties by name so equal scores have a fixed order
LEADERBOARD_SORT = [("points", -1), ("name", 1)]


async def get_leaderboard(players_col) -> List[Dict]:
    cursor = players_col.find({}, {"_id": 0, "name": 1, "points": 1}).sort(LEADERBOARD_SORT)
    out = []
    async for d in cursor:
        out.append(d)
    return out


async def increment_points(players_col, name: str, delta: int) -> Dict:
    """
    Add `delta` to the player's points, creating the player if missing.
    Single findOneAndUpdate so concurrent increments for one name never lose updates.
    """
    try:
        return await _upsert_inc(players_col, name, delta)
    except DuplicateKeyError:
        # two upserts raced to insert the same new name; the other one won
        logger.info("retrying increment for %r after duplicate key", name)
        return await _upsert_inc(players_col, name, delta)


async def _upsert_inc(players_col, name: str, delta: int) -> Dict:
    doc = await players_col.find_one_and_update(
        {"name": name},
        {"$inc": {"points": delta}},
        projection={"_id": 0, "name": 1, "points": 1},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return doc

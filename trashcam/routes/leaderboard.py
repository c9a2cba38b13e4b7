# trashcam/routes/leaderboard.py
import logging
from fastapi import APIRouter, HTTPException, Response, Depends
from typing import List
from pymongo.errors import PyMongoError
from ..db import get_players_col
from ..models import LeaderboardIn
from ..schemas import PlayerOut
from ..services.leaderboard import get_leaderboard, increment_points
from ..services.report_service import make_csv_leaderboard, make_pdf_leaderboard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("", response_model=List[PlayerOut])
async def fetch_leaderboard(players_col=Depends(get_players_col)):
    try:
        return await get_leaderboard(players_col)
    except PyMongoError:
        logger.exception("Error fetching leaderboard")
        raise HTTPException(status_code=500, detail="Failed to fetch leaderboard")


@router.post("", response_model=PlayerOut)
async def update_leaderboard(entry: LeaderboardIn, players_col=Depends(get_players_col)):
    """
    Add `entry.points` to the player's score (a delta, not an absolute value).
    Unknown players are created with that many points.
    """
    try:
        return await increment_points(players_col, entry.name, entry.points)
    except PyMongoError:
        logger.exception("Error updating leaderboard")
        raise HTTPException(status_code=500, detail="Failed to update leaderboard")


@router.get("/export")
async def export_leaderboard(format: str = "json", players_col=Depends(get_players_col)):
    try:
        players = await get_leaderboard(players_col)
    except PyMongoError:
        logger.exception("Error exporting leaderboard")
        raise HTTPException(status_code=500, detail="Failed to export leaderboard")

    if format == "json":
        return {"players": players}
    elif format == "csv":
        return Response(
            content=make_csv_leaderboard(players),
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=leaderboard.csv"},
        )
    elif format == "pdf":
        return Response(
            content=make_pdf_leaderboard(players),
            media_type="application/pdf",
            headers={"Content-Disposition": "attachment; filename=leaderboard.pdf"},
        )
    else:
        raise HTTPException(status_code=400, detail="format must be json|csv|pdf")

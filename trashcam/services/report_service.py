# trashcam/services/report_service.py
import pandas as pd
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas
from io import BytesIO
from datetime import datetime, timezone
from typing import List, Dict

def make_csv_leaderboard(players: List[Dict]) -> bytes:
    df = pd.DataFrame(players, columns=["name", "points"])
    df.insert(0, "rank", range(1, len(df) + 1))
    return df.to_csv(index=False).encode("utf-8")

def make_pdf_leaderboard(players: List[Dict]) -> bytes:
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    W, H = letter
    y = H - 50

    c.setFont("Helvetica-Bold", 16)
    c.drawString(50, y, "Trash Sorting Leaderboard")
    y -= 30

    c.setFont("Helvetica", 10)
    c.drawString(50, y, f"Generated: {datetime.now(timezone.utc).isoformat()}")
    y -= 12
    c.drawString(50, y, f"Players: {len(players)}")
    y -= 24

    c.setFont("Helvetica-Bold", 11)
    c.drawString(50, y, "Rank")
    c.drawString(100, y, "Name")
    c.drawString(400, y, "Points")
    y -= 16
    c.setFont("Helvetica", 10)
    for rank, p in enumerate(players, start=1):
        if y < 60:
            c.showPage()
            c.setFont("Helvetica", 10)
            y = H - 50
        c.drawString(50, y, str(rank))
        c.drawString(100, y, str(p.get("name", ""))[:60])
        c.drawString(400, y, str(p.get("points", 0)))
        y -= 12

    c.showPage()
    c.save()
    pdf = buffer.getvalue()
    buffer.close()
    return pdf

"""
Public API routes - seating chart and exports
"""

from fastapi import APIRouter, Depends, HTTPException

from app.core.config import settings
from app.core.store import get_guest_repo
from app.schemas.seating import TableGroupResponse
from app.services.collaborators import AttachmentExporter, export_best_effort
from app.services.list_service import ListService
from app.services.repositories import GuestListRepo
from app.services.seating_service import SeatingService
from app.utils.responses import success_response

router = APIRouter()

exporter = AttachmentExporter()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.get("/seating")
async def get_seating_chart(repo: GuestListRepo = Depends(get_guest_repo)):
    """Get the full seating chart grouped by table"""
    groups = SeatingService.group_by_table(repo.all())
    
    data = [
        TableGroupResponse(
            table=group.table,
            copy_text=SeatingService.copy_text(group.table),
            guests=[guest.name for guest in group.guests]
        ).model_dump()
        for group in groups
    ]
    
    return success_response(
        message="Seating chart retrieved successfully",
        data=data
    )

@router.get("/seating/summary")
async def get_seating_summary(repo: GuestListRepo = Depends(get_guest_repo)):
    """Get seating summary with per-table counts"""
    return success_response(
        message="Seating summary retrieved successfully",
        data=SeatingService.get_seating_summary(repo.all())
    )

@router.get("/guests/export.csv")
async def export_csv(repo: GuestListRepo = Depends(get_guest_repo)):
    """Download the current guest list as CSV"""
    content = ListService.serialize_list(repo.all()).encode("utf-8")
    response = export_best_effort(
        exporter, f"{settings.EXPORT_FILENAME}.csv", content, "text/csv"
    )
    if response is None:
        raise HTTPException(status_code=500, detail="Export failed")
    return response

@router.get("/guests/export.xlsx")
async def export_xlsx(repo: GuestListRepo = Depends(get_guest_repo)):
    """Download the current guest list as an Excel workbook"""
    content = ListService.export_excel(repo.all())
    response = export_best_effort(
        exporter,
        f"{settings.EXPORT_FILENAME}.xlsx",
        content,
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    if response is None:
        raise HTTPException(status_code=500, detail="Export failed")
    return response

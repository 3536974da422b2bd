"""
Admin API routes - replacing and resetting the guest list
"""

import logging
from fastapi import APIRouter, Depends, UploadFile, File, Form
from fastapi.responses import RedirectResponse

from app.core.config import settings
from app.core.store import get_guest_repo
from app.schemas.guest import ImportRequest
from app.services.list_service import ListService
from app.services.repositories import GuestListRepo
from app.utils.responses import success_response, error_response, bad_request_error, payload_too_large_error

logger = logging.getLogger(__name__)

router = APIRouter()

UNCHANGED_MESSAGE = (
    "Guest list unchanged: the data needs a header with name and table "
    "columns (e.g. 'nombre,mesa') and at least one complete row."
)

def import_outcome(count, repo: GuestListRepo):
    """Map an import result onto the standard response envelope"""
    if count is None:
        return error_response(
            message=UNCHANGED_MESSAGE,
            error_code="LIST_UNCHANGED",
            details={"total_guests": repo.count()},
            status_code=422
        )
    
    return success_response(
        message=f"Guest list updated with {count} guests",
        data={"total_guests": count}
    )

@router.post("/guests/import")
async def import_guest_list(
    import_data: ImportRequest,
    repo: GuestListRepo = Depends(get_guest_repo)
):
    """Replace the guest list with pasted CSV text"""
    count = repo.replace_from_text(import_data.text)
    return import_outcome(count, repo)

@router.post("/guests/import-form")
async def import_guest_list_form(
    csv_text: str = Form(""),
    repo: GuestListRepo = Depends(get_guest_repo)
):
    """Replace the guest list from the finder page's paste panel"""
    count = repo.replace_from_text(csv_text)
    imported = 0 if count is None else 1
    return RedirectResponse(url=f"/?mode=list&imported={imported}", status_code=303)

@router.post("/guests/import.xlsx")
async def import_guest_workbook(
    file: UploadFile = File(...),
    repo: GuestListRepo = Depends(get_guest_repo)
):
    """Replace the guest list with the first sheet of an Excel workbook"""
    file_content = await file.read()
    if len(file_content) > settings.MAX_UPLOAD_SIZE:
        raise payload_too_large_error(settings.MAX_UPLOAD_SIZE)
    
    try:
        df = ListService.read_excel(file_content)
    except Exception as e:
        logger.info("Unreadable workbook %s: %s", file.filename, e)
        raise bad_request_error(f"Could not read Excel file: {str(e)}")
    
    count = repo.replace_from_dataframe(df)
    return import_outcome(count, repo)

@router.post("/guests/reset")
async def reset_guest_list(repo: GuestListRepo = Depends(get_guest_repo)):
    """Restore the guest list shipped with the application"""
    count = repo.reset()
    return success_response(
        message="Guest list reset to defaults",
        data={"total_guests": count}
    )

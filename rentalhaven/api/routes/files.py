"""File upload route."""

from fastapi import APIRouter, File, UploadFile

from rentalhaven.core.exceptions import BadRequest
from rentalhaven.schemas.common import MessageResponse
from rentalhaven.services.files import save_upload

router = APIRouter(prefix="/files", tags=["files"])


@router.post("/upload", response_model=MessageResponse)
def upload_file(file: UploadFile = File(...)) -> MessageResponse:
    """Store the uploaded file under its original name."""
    if not file.filename:
        raise BadRequest("No file provided")
    save_upload(file.filename, file.file)
    return MessageResponse(message=f"File uploaded: {file.filename}")

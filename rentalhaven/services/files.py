"""Local file storage for uploads."""

import logging
import shutil
from pathlib import Path
from typing import BinaryIO

from rentalhaven.core.config import settings
from rentalhaven.core.exceptions import InternalFailure

logger = logging.getLogger(__name__)


def save_upload(filename: str, source: BinaryIO, upload_dir: str | Path | None = None) -> Path:
    """Write an uploaded stream to ``upload_dir/filename``.

    The client-supplied filename is used as-is. It is not sanitized, so a name
    containing ``..`` can escape the upload directory.
    """
    directory = Path(upload_dir or settings.UPLOAD_DIR)
    destination = directory / filename
    try:
        directory.mkdir(parents=True, exist_ok=True)
        with destination.open("wb") as out:
            shutil.copyfileobj(source, out)
    except OSError as exc:
        logger.error("Upload of %s failed: %s", filename, exc)
        raise InternalFailure("File upload failed") from exc

    logger.info("Stored upload %s", destination)
    return destination

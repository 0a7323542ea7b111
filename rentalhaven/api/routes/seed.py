"""Sample data route."""

import random

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rentalhaven.api.dependencies import get_rng
from rentalhaven.core.database import get_db
from rentalhaven.schemas.common import MessageResponse
from rentalhaven.services.seed import seed_properties

router = APIRouter(prefix="/seed", tags=["seed"])


@router.post("", response_model=MessageResponse)
def seed(
    db: Session = Depends(get_db),
    rng: random.Random = Depends(get_rng),
) -> MessageResponse:
    """Append the sample catalog. Not idempotent."""
    return MessageResponse(message=seed_properties(db, rng))

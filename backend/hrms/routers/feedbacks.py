"""Feedback endpoints."""
from ..crud import CrudResource, build_crud_router
from ..models import Feedback
from ..schemas import FeedbackRead, FeedbackWrite

resource = CrudResource(
    entity="Feedback",
    table=Feedback.__table__,
    create_schema=FeedbackWrite,
    update_schema=FeedbackWrite,
    read_schema=FeedbackRead,
)

router = build_crud_router(resource, prefix="/feedbacks", tags=["feedbacks"])

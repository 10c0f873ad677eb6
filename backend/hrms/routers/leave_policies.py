"""Leave policy endpoints."""
from ..crud import CrudResource, build_crud_router
from ..models import LeavePolicy
from ..schemas import LeavePolicyRead, LeavePolicyWrite

resource = CrudResource(
    entity="Leave policy",
    table=LeavePolicy.__table__,
    create_schema=LeavePolicyWrite,
    update_schema=LeavePolicyWrite,
    read_schema=LeavePolicyRead,
)

router = build_crud_router(resource, prefix="/leave_policies", tags=["leave policies"])

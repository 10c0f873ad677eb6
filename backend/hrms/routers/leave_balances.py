"""Leave balance endpoints."""
from ..crud import CrudResource, build_crud_router
from ..models import LeaveBalance
from ..schemas import LeaveBalanceCreate, LeaveBalanceRead, LeaveBalanceUpdate

resource = CrudResource(
    entity="Leave balance",
    table=LeaveBalance.__table__,
    create_schema=LeaveBalanceCreate,
    update_schema=LeaveBalanceUpdate,
    read_schema=LeaveBalanceRead,
)

router = build_crud_router(resource, prefix="/leave_balances", tags=["leave balances"])

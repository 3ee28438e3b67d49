from .catalog import (
    ComboIn,
    ComboRead,
    ComboUpdate,
    ServiceIn,
    ServiceRead,
    ServiceUpdate,
)
from .company import CompanyConfigIn, CompanyConfigRead, TimbradoStatus
from .customer import CustomerIn, CustomerRead, VehicleIn, VehicleRead
from .inventory import InventoryItemIn, InventoryItemRead, StockAdjustIn
from .sale import (
    AdHocLine,
    ComboLine,
    LineItemRequest,
    ProductLine,
    SaleCreate,
    SaleItemRead,
    SaleRead,
    ServiceLine,
)
from .work_order import (
    WorkOrderIn,
    WorkOrderItemIn,
    WorkOrderItemRead,
    WorkOrderRead,
    WorkOrderStatusIn,
)

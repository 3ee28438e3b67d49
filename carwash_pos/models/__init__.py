from .base import Base
from .company_config import CompanyConfig
from .customer import Customer, DocTypeEnum
from .inventory_item import InventoryItem, StockAlertEnum, StockUnitEnum
from .invoice_sequence import InvoiceSequence
from .sale import PaymentMethodEnum, Sale
from .sale_item import SaleItem
from .service import Service, ServiceCategoryEnum, ServiceCombo, ServiceComboItem
from .vehicle import Vehicle
from .work_order import WorkOrder, WorkOrderItem, WorkOrderStatusEnum
from .work_order_sequence import WorkOrderSequence

__all__ = [
    "Base",
    "CompanyConfig",
    "Customer",
    "DocTypeEnum",
    "InventoryItem",
    "StockAlertEnum",
    "StockUnitEnum",
    "InvoiceSequence",
    "PaymentMethodEnum",
    "Sale",
    "SaleItem",
    "Service",
    "ServiceCategoryEnum",
    "ServiceCombo",
    "ServiceComboItem",
    "Vehicle",
    "WorkOrder",
    "WorkOrderItem",
    "WorkOrderStatusEnum",
    "WorkOrderSequence",
]

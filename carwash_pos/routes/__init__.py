from fastapi import APIRouter

from .catalog import router as catalog_router
from .company import router as company_router
from .customers import router as customers_router
from .inventory import router as inventory_router
from .sales import router as sales_router
from .work_orders import router as work_orders_router

api_router = APIRouter(prefix="/api")
api_router.include_router(company_router, tags=["company"])
api_router.include_router(customers_router, tags=["customers"])
api_router.include_router(catalog_router, tags=["catalog"])
api_router.include_router(work_orders_router, tags=["work-orders"])
api_router.include_router(inventory_router, tags=["inventory"])
api_router.include_router(sales_router, tags=["sales"])

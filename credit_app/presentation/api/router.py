from fastapi import APIRouter

from .customers import customer_router
from .credits import credit_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])

api_router = APIRouter(prefix="/api")

api_router.include_router(customer_router, tags=["Customers"])
api_router.include_router(credit_router, tags=["Credits"])

router.include_router(api_router)

from fastapi import APIRouter, Depends

from ..core.security import verify_pass_key
from .endpoints import accounts, attributes, factions, items

# Every route, including /test, requires the shared pass key.
# main.py mounts this router under settings.API_PREFIX.
api_router = APIRouter(dependencies=[Depends(verify_pass_key)])


@api_router.get("/test", tags=["Health"])
def test_endpoint():
    return "Hello World!"


api_router.include_router(items.router, prefix="/items", tags=["Items"])
api_router.include_router(attributes.router, prefix="/attributes", tags=["Attributes"])
api_router.include_router(accounts.router, prefix="/accounts", tags=["Accounts"])
api_router.include_router(factions.router, prefix="/factions", tags=["Factions"])

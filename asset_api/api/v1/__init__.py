from fastapi import APIRouter

from asset_api.api.v1.assets import router as assets_router

router = APIRouter()
router.include_router(assets_router)

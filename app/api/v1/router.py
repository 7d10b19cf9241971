from fastapi import APIRouter

from infrastructure.i18n.routes import router as i18n_router
from packages.tags.routes import router as tags_router

# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(i18n_router)
router.include_router(tags_router)

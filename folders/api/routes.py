from fastapi import APIRouter

from folders.api.v1.folders import router as folders_router

api_router = APIRouter()

api_router.include_router(folders_router, prefix="/orgs/{org_id}/folders", tags=["folders"])

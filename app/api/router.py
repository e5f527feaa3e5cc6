from fastapi import APIRouter
from app.modules.auth.router import router as auth_router
from app.modules.doctors.router import router as doctors_router
from app.modules.patients.router import router as patients_router
from app.modules.templates.router import router as templates_router
from app.modules.usg_reports.router import router as usg_reports_router
from app.modules.users.router import router as users_router

api_router = APIRouter()
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(doctors_router, prefix="/doctor", tags=["doctors"])
api_router.include_router(patients_router, prefix="/patient", tags=["patients"])
api_router.include_router(templates_router, prefix="/template", tags=["templates"])
api_router.include_router(usg_reports_router, prefix="/usg-report", tags=["usg-reports"])
api_router.include_router(users_router, prefix="/user", tags=["users"])

@api_router.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}

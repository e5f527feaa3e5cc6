from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.db import get_session
from app.core.pagination import Page, query_filters
from app.core.security import get_settings
from app.modules.doctors.schemas import DoctorIn, DoctorOut, DoctorFilters
from app.modules.doctors.service import DoctorService

# Doctor routes are open: no bearer token required.
router = APIRouter()

def svc(session: AsyncSession = Depends(get_session), settings: Settings = Depends(get_settings)) -> DoctorService:
    return DoctorService(session, default_page_size=settings.DEFAULT_PAGE_SIZE, max_page_size=settings.MAX_PAGE_SIZE)

@router.get("", response_model=Page[DoctorOut])
async def list_doctors(filters: DoctorFilters = Depends(query_filters(DoctorFilters)), service: DoctorService = Depends(svc)):
    return await service.list(filters)

@router.post("", response_model=DoctorOut, status_code=status.HTTP_201_CREATED)
async def create_doctor(payload: DoctorIn, service: DoctorService = Depends(svc)):
    return await service.create(payload)

@router.get("/{doctor_id}", response_model=DoctorOut)
async def get_doctor(doctor_id: int, service: DoctorService = Depends(svc)):
    return await service.get(doctor_id)

@router.put("/{doctor_id}", response_model=DoctorOut)
async def update_doctor(doctor_id: int, payload: DoctorIn, service: DoctorService = Depends(svc)):
    return await service.update(doctor_id, payload)

@router.delete("/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_doctor(doctor_id: int, service: DoctorService = Depends(svc)):
    await service.delete(doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

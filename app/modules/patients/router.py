from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.db import get_session
from app.core.pagination import Page, query_filters
from app.core.security import ensure_logged_in, get_settings
from app.modules.patients.schemas import PatientIn, PatientOut, PatientFilters
from app.modules.patients.service import PatientService

router = APIRouter(dependencies=[Depends(ensure_logged_in)])

def svc(session: AsyncSession = Depends(get_session), settings: Settings = Depends(get_settings)) -> PatientService:
    return PatientService(session, default_page_size=settings.DEFAULT_PAGE_SIZE, max_page_size=settings.MAX_PAGE_SIZE)

@router.get("", response_model=Page[PatientOut])
async def list_patients(filters: PatientFilters = Depends(query_filters(PatientFilters)), service: PatientService = Depends(svc)):
    return await service.list(filters)

@router.post("", response_model=PatientOut, status_code=status.HTTP_201_CREATED)
async def create_patient(payload: PatientIn, service: PatientService = Depends(svc)):
    return await service.create(payload)

@router.get("/{patient_id}", response_model=PatientOut)
async def get_patient(patient_id: int, service: PatientService = Depends(svc)):
    return await service.get(patient_id)

@router.put("/{patient_id}", response_model=PatientOut)
async def update_patient(patient_id: int, payload: PatientIn, service: PatientService = Depends(svc)):
    return await service.update(patient_id, payload)

@router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_patient(patient_id: int, service: PatientService = Depends(svc)):
    await service.delete(patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

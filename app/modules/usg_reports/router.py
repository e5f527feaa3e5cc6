from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.db import get_session
from app.core.pagination import Page, query_filters
from app.core.security import ensure_logged_in, get_settings
from app.modules.usg_reports.schemas import USGReportIn, USGReportOut, USGReportFilters
from app.modules.usg_reports.service import USGReportService

router = APIRouter(dependencies=[Depends(ensure_logged_in)])

def svc(session: AsyncSession = Depends(get_session), settings: Settings = Depends(get_settings)) -> USGReportService:
    return USGReportService(session, default_page_size=settings.DEFAULT_PAGE_SIZE, max_page_size=settings.MAX_PAGE_SIZE)

@router.get("", response_model=Page[USGReportOut])
async def list_usg_reports(filters: USGReportFilters = Depends(query_filters(USGReportFilters)), service: USGReportService = Depends(svc)):
    return await service.list(filters)

@router.post("", response_model=USGReportOut, status_code=status.HTTP_201_CREATED)
async def create_usg_report(payload: USGReportIn, service: USGReportService = Depends(svc)):
    return await service.create(payload)

@router.get("/{report_id}", response_model=USGReportOut)
async def get_usg_report(report_id: int, service: USGReportService = Depends(svc)):
    return await service.get(report_id)

@router.put("/{report_id}", response_model=USGReportOut)
async def update_usg_report(report_id: int, payload: USGReportIn, service: USGReportService = Depends(svc)):
    return await service.update(report_id, payload)

@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_usg_report(report_id: int, service: USGReportService = Depends(svc)):
    await service.delete(report_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

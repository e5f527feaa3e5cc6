from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.db import get_session
from app.core.pagination import Page, query_filters
from app.core.security import ensure_logged_in, get_settings
from app.modules.templates.schemas import TemplateIn, TemplateOut, TemplateFilters
from app.modules.templates.service import TemplateService

router = APIRouter(dependencies=[Depends(ensure_logged_in)])

def svc(session: AsyncSession = Depends(get_session), settings: Settings = Depends(get_settings)) -> TemplateService:
    return TemplateService(session, default_page_size=settings.DEFAULT_PAGE_SIZE, max_page_size=settings.MAX_PAGE_SIZE)

@router.get("", response_model=Page[TemplateOut])
async def list_templates(filters: TemplateFilters = Depends(query_filters(TemplateFilters)), service: TemplateService = Depends(svc)):
    return await service.list(filters)

@router.post("", response_model=TemplateOut, status_code=status.HTTP_201_CREATED)
async def create_template(payload: TemplateIn, service: TemplateService = Depends(svc)):
    return await service.create(payload)

@router.get("/{template_id}", response_model=TemplateOut)
async def get_template(template_id: int, service: TemplateService = Depends(svc)):
    return await service.get(template_id)

@router.put("/{template_id}", response_model=TemplateOut)
async def update_template(template_id: int, payload: TemplateIn, service: TemplateService = Depends(svc)):
    return await service.update(template_id, payload)

@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(template_id: int, service: TemplateService = Depends(svc)):
    await service.delete(template_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from app.core.errors import ApiError, conflict
from app.core.pagination import contains, date_range, equals
from app.core.service import ResourceService
from app.modules.usg_reports.models import USGReport
from app.modules.usg_reports.repository import USGReportRepository
from app.modules.usg_reports.schemas import USGReportFilters, USGReportOut

class USGReportService(ResourceService[USGReportRepository, USGReportFilters]):
    resource_name = "USGReport"
    repository_class = USGReportRepository
    out_schema = USGReportOut

    def filter_conditions(self, filters: USGReportFilters):
        return (
            equals(USGReport.patient_id, filters.patient),
            equals(USGReport.referrer_id, filters.referrer),
            contains(USGReport.part_of_scan, filters.part_of_scan),
            contains(USGReport.findings, filters.findings),
            *date_range(USGReport.date, after=filters.date_after, before=filters.date_before),
        )

    def integrity_error(self, exc: IntegrityError) -> ApiError | None:
        # the only constraints on this table are the patient/referrer foreign keys
        return conflict("Invalid referrer or patient")

    async def create(self, payload: BaseModel) -> USGReport:
        obj = await super().create(payload)
        return await self.repo.load_relations(obj)

    async def update(self, obj_id: int, payload: BaseModel) -> USGReport:
        obj = await super().update(obj_id, payload)
        return await self.repo.load_relations(obj)

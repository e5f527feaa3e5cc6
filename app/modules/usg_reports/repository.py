from app.core.repository import SoftDeleteRepository
from app.modules.usg_reports.models import USGReport

class USGReportRepository(SoftDeleteRepository[USGReport]):
    model = USGReport
    fields = ("patient_id", "referrer_id", "part_of_scan", "findings", "date")

    async def load_relations(self, obj: USGReport) -> USGReport:
        await self.session.refresh(obj, attribute_names=["patient", "referrer"])
        return obj

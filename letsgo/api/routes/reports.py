from fastapi import APIRouter, Depends

from letsgo.core.dependencies import get_report_service, require_actor
from letsgo.core.logging_config import get_logger
from letsgo.models.user import User
from letsgo.schemas.common import ApiResponse
from letsgo.schemas.report import DailyReportOut
from letsgo.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["Reports"])
logger = get_logger()


# =====================================================================
# DAILY REPORT
# =====================================================================
@router.get("/daily", response_model=ApiResponse[DailyReportOut])
def daily_report(
    actor: User = Depends(require_actor),
    service: ReportService = Depends(get_report_service),
):
    report = service.daily_report()

    logger.bind(log_type="admin").info(
        f"Daily report | User={actor.id} | Income={report['stats']['today_income']}"
    )

    return ApiResponse(data=DailyReportOut.model_validate(report, from_attributes=True))

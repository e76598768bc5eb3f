from __future__ import annotations

from pydantic import Field

from factory_dashboard.schemas.common import CamelModel


class DashboardMetrics(CamelModel):
    """Per-factory KPI summary shown on the dashboard cards."""
    production_efficiency: int = Field(..., description="Mean line efficiency, whole percent")
    active_lines: str = Field(..., description="'<active>/<total>' production lines")
    todays_output: int = Field(..., description="Sum of completed units across lines")
    attendance: str = Field(..., description="'<present>/<employees>' across departments")
    attendance_rate: int = Field(..., description="Present over employees, whole percent")

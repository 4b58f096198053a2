"""
Health endpoint for API v1.

Reports that the service is up together with the number of employees
currently held in memory.  No dependency checks are needed since the
store lives inside the process.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from employee_api.app.api.deps import get_employee_store
from employee_api.app.core.config import settings
from employee_api.app.core.store import EmployeeStore

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
def health_check(store: EmployeeStore = Depends(get_employee_store)) -> Dict[str, Any]:
    return {
        "status": "healthy",
        "service": settings.project_name,
        "version": settings.api_version,
        "employees": store.count(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

import io
import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from comedor.api.dependencies import get_employee_repo
from comedor.domain.Employee import Employee
from comedor.infra.Employee_Repository import EmployeeRepository
from comedor.utilities.export_import import EmployeeExporter, EmployeeImporter, EmployeeImportError
from comedor.utilities.validators import EmployeeInput

router = APIRouter(prefix="/api/employees", tags=["employees"])
logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".xlsx", ".csv")


@router.get("/{branch_id}")
def list_employees(branch_id: str, repo: EmployeeRepository = Depends(get_employee_repo)):
    employees = repo.list_for_branch(branch_id)
    return {"branch_id": branch_id, "count": len(employees), "employees": [e.to_dict() for e in employees]}


@router.post("/{branch_id}")
def add_employee(branch_id: str, payload: EmployeeInput, repo: EmployeeRepository = Depends(get_employee_repo)):
    emp = Employee(name=payload.name, branch_id=branch_id, position=payload.position,
                   email=payload.email, active=payload.active)
    errors = emp.validate()
    if errors:
        raise HTTPException(status_code=400, detail=errors)
    added, _ = repo.add_many(branch_id, [emp])
    if not added:
        raise HTTPException(status_code=400, detail="Employee already exists")
    return emp.to_dict()


@router.delete("/{branch_id}/{employee_id}")
def delete_employee(branch_id: str, employee_id: str, repo: EmployeeRepository = Depends(get_employee_repo)):
    if not any(e.id == employee_id for e in repo.list_for_branch(branch_id)):
        raise HTTPException(status_code=404, detail="Employee not found")
    repo.remove(employee_id)
    return {"success": True}


@router.post("/{branch_id}/import")
async def import_employees(branch_id: str, file: UploadFile = File(...),
                           repo: EmployeeRepository = Depends(get_employee_repo)):
    """Import a roster spreadsheet. Row-level problems are reported, not fatal."""
    filename = file.filename or ""
    if not filename.lower().endswith(ALLOWED_EXTENSIONS):
        raise HTTPException(status_code=400, detail="Only .xlsx and .csv files are supported")
    content = await file.read()
    importer = EmployeeImporter(branch_id)
    try:
        result = importer.import_file(io.BytesIO(content), filename=filename)
    except EmployeeImportError as e:
        raise HTTPException(status_code=400, detail=str(e))
    added, skipped = repo.add_many(branch_id, result.employees)
    return {
        "success": result.success,
        "imported": len(added),
        "skipped": [e.name for e in skipped],
        "errors": result.errors,
    }


@router.get("/{branch_id}/export")
def export_employees(branch_id: str, repo: EmployeeRepository = Depends(get_employee_repo)):
    content = EmployeeExporter.to_csv(repo.list_for_branch(branch_id))
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename=empleados_{branch_id}.csv"},
    )

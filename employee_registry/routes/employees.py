from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from typing import List
import logging

from ..cache.manager import CacheManager
from ..database.connection import get_db, get_cache
from ..database.store import EmployeeStore
from ..errors import StoreError
from ..models.employee import EmployeeCreate, EmployeeDetail, EmployeeSummary
from ..services.employees import EmployeeRepository, paginate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/employees", tags=["employees"])

# Largest id the employees.id INTEGER column can hold
MAX_EMPLOYEE_ID = 2**31 - 1

def get_repository(
    db: Session = Depends(get_db),
    cache: CacheManager = Depends(get_cache)
) -> EmployeeRepository:
    return EmployeeRepository(EmployeeStore(db), cache)

def _text(message: str, status_code: int = status.HTTP_200_OK) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)

@router.get("", response_model=List[EmployeeSummary])
def list_employees(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    repository: EmployeeRepository = Depends(get_repository)
):
    """List employees, one page at a time"""
    try:
        employees = repository.list_all()
    except StoreError as e:
        logger.error(f"Error fetching employees: {e.message}")
        return _text("Error fetching employees", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return paginate(employees, page, limit)

@router.get("/{employee_id}", response_model=EmployeeDetail)
def get_employee(
    employee_id: int = Path(..., ge=1, le=MAX_EMPLOYEE_ID),
    repository: EmployeeRepository = Depends(get_repository)
):
    """Fetch one employee with contacts"""
    try:
        employee = repository.get_by_id(employee_id)
    except StoreError as e:
        logger.error(f"Error fetching employee {employee_id}: {e.message}")
        return _text(f"Error fetching employee with ID {employee_id}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    if employee is None:
        return _text(f"Employee with ID {employee_id} not found", status.HTTP_404_NOT_FOUND)
    
    return employee

@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee: EmployeeCreate,
    repository: EmployeeRepository = Depends(get_repository)
):
    try:
        employee_id = repository.create(employee)
    except StoreError as e:
        logger.error(f"Error creating employee: {e.message}")
        return _text("Error creating employee", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _text(f"Created employee with ID {employee_id}", status.HTTP_201_CREATED)

@router.put("/{employee_id}", response_class=PlainTextResponse)
def update_employee(
    employee: EmployeeCreate,
    employee_id: int = Path(..., ge=1, le=MAX_EMPLOYEE_ID),
    repository: EmployeeRepository = Depends(get_repository)
):
    try:
        updated = repository.update(employee_id, employee)
    except StoreError as e:
        logger.error(f"Error updating employee {employee_id}: {e.message}")
        return _text(f"Error updating employee with ID {employee_id}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    if not updated:
        return _text(f"Employee with ID {employee_id} not found", status.HTTP_404_NOT_FOUND)
    
    return _text(f"Updated employee with ID {employee_id}")

@router.delete("/{employee_id}", response_class=PlainTextResponse)
def delete_employee(
    employee_id: int = Path(..., ge=1, le=MAX_EMPLOYEE_ID),
    repository: EmployeeRepository = Depends(get_repository)
):
    try:
        deleted = repository.delete(employee_id)
    except StoreError as e:
        logger.error(f"Error deleting employee {employee_id}: {e.message}")
        return _text(f"Error deleting employee with ID {employee_id}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    if not deleted:
        return _text(f"Employee with ID {employee_id} not found", status.HTTP_404_NOT_FOUND)
    
    return _text(f"Deleted employee with ID {employee_id}")

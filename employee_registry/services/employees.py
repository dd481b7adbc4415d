"""
Employee repository

Cache-aside over a single aggregate: the full employee list is cached under
one key and deleted on every committed mutation. Point lookups always go to
the store. An unreachable cache never fails a request: reads fall back to
the store, and a failed invalidation is logged while the write still counts
as done.
"""
import json
import logging
from typing import List, Optional, Sequence, TypeVar

from ..cache.config import CacheConfig
from ..cache.manager import CacheManager
from ..database.store import EmployeeStore
from ..errors import CacheUnavailableError
from ..models.employee import EmployeeCreate, EmployeeDetail, EmployeeSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


def paginate(items: Sequence[T], page: int = 1, limit: int = 10) -> List[T]:
    """Slice one page out of items; pages start at 1, out of range gives []"""
    start = (page - 1) * limit
    return list(items[start:start + limit])


class EmployeeRepository:
    """Read/write access to employees through the store and the list cache"""

    def __init__(
        self,
        store: EmployeeStore,
        cache: CacheManager,
        list_key: str = CacheConfig.EMPLOYEES_LIST_KEY,
        list_ttl: int = CacheConfig.EMPLOYEES_LIST_TTL,
    ):
        self.store = store
        self.cache = cache
        self.list_key = list_key
        self.list_ttl = list_ttl

    # Reads

    def list_all(self) -> List[EmployeeSummary]:
        """Return every employee as {id, name, email}, served from cache when possible"""
        cached = self._read_cached_list()
        if cached is not None:
            return cached

        employees = [
            EmployeeSummary.model_validate(row)
            for row in self.store.select_all_employees()
        ]
        self._populate_list(employees)
        return employees

    def get_by_id(self, employee_id: int) -> Optional[EmployeeDetail]:
        """Return the employee with its contacts, or None if it does not exist"""
        employee = self.store.select_employee(employee_id)
        if employee is None:
            return None

        contacts = self.store.select_contacts(employee_id)
        return EmployeeDetail(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            contacts=[{"type": c.type, "value": c.value} for c in contacts],
        )

    # Writes

    def create(self, data: EmployeeCreate) -> int:
        """Insert an employee and its contacts, returning the new id"""
        try:
            employee_id = self.store.insert_employee(
                name=data.name,
                email=data.email,
                phone=data.phone,
                address=data.address,
            )
            self.store.insert_contacts(employee_id, data.contacts)
            self.store.commit()
        except Exception:
            self.store.rollback()
            raise

        logger.info(f"Created employee with ID {employee_id}")
        self.invalidate_list()
        return employee_id

    def update(self, employee_id: int, data: EmployeeCreate) -> bool:
        """Replace an employee's fields and contact set; False if it does not exist"""
        try:
            updated = self.store.update_employee(
                employee_id,
                name=data.name,
                email=data.email,
                phone=data.phone,
                address=data.address,
            )
            if not updated:
                self.store.rollback()
                logger.info(f"Employee with ID {employee_id} not found for update")
                return False

            self.store.delete_contacts(employee_id)
            self.store.insert_contacts(employee_id, data.contacts)
            self.store.commit()
        except Exception:
            self.store.rollback()
            raise

        logger.info(f"Updated employee with ID {employee_id}")
        self.invalidate_list()
        return True

    def delete(self, employee_id: int) -> bool:
        """Delete an employee and its contacts; False if it does not exist"""
        try:
            self.store.delete_contacts(employee_id)
            deleted = self.store.delete_employee(employee_id)
            if not deleted:
                self.store.rollback()
                logger.info(f"Employee with ID {employee_id} not found for delete")
                return False

            self.store.commit()
        except Exception:
            self.store.rollback()
            raise

        logger.info(f"Deleted employee with ID {employee_id}")
        self.invalidate_list()
        return True

    # Cache

    def invalidate_list(self) -> bool:
        """Drop the cached list; failures are logged, never raised"""
        try:
            invalidated = self.cache.delete(self.list_key)
        except CacheUnavailableError as e:
            logger.error(f"Failed to invalidate {self.list_key} cache: {e.message}")
            return False

        if invalidated:
            logger.info(f"Invalidated {self.list_key} cache")
        return invalidated

    def _read_cached_list(self) -> Optional[List[EmployeeSummary]]:
        try:
            payload = self.cache.get(self.list_key)
        except CacheUnavailableError as e:
            logger.warning(f"Cache unavailable, reading employees from store: {e.message}")
            return None

        if payload is None:
            return None

        try:
            return [EmployeeSummary.model_validate(item) for item in json.loads(payload)]
        except (ValueError, TypeError) as e:
            logger.warning(f"Discarding unreadable {self.list_key} cache entry: {e}")
            return None

    def _populate_list(self, employees: List[EmployeeSummary]):
        payload = json.dumps([employee.model_dump() for employee in employees])
        try:
            if self.cache.set(self.list_key, payload, self.list_ttl):
                logger.info(f"Cached {self.list_key} for {self.list_ttl} seconds")
        except CacheUnavailableError as e:
            logger.warning(f"Could not cache {self.list_key}: {e.message}")

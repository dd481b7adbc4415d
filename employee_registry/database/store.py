"""
Store adapter over the employees and contacts relations

Every statement runs inside the caller's Session transaction; nothing is
committed until commit() is called.
"""
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterable, Iterator, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from ..errors import StoreError, StoreUnavailableError
from .models import Contact, Employee

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "email", "phone", "address")


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (OperationalError, InterfaceError, PoolTimeoutError) as e:
        logger.error(f"Store unavailable during {operation}: {e}")
        raise StoreUnavailableError(f"Store unavailable during {operation}", original_error=e) from e
    except SQLAlchemyError as e:
        logger.error(f"Store error during {operation}: {e}")
        raise StoreError(f"Store error during {operation}", original_error=e) from e


class EmployeeStore:
    """Parameterized statements against employees and contacts"""

    def __init__(self, db: Session):
        self.db = db

    def insert_employee(
        self,
        name: str,
        email: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> int:
        """Insert an employee row and return its generated id"""
        with _translate_errors("insert_employee"):
            employee = Employee(name=name, email=email, phone=phone, address=address)
            self.db.add(employee)
            self.db.flush()
            return employee.id

    def select_all_employees(self) -> List[Employee]:
        with _translate_errors("select_all_employees"):
            return list(self.db.scalars(select(Employee).order_by(Employee.id)))

    def select_employee(self, employee_id: int) -> Optional[Employee]:
        with _translate_errors("select_employee"):
            return self.db.scalars(
                select(Employee).where(Employee.id == employee_id)
            ).first()

    def select_contacts(self, employee_id: int) -> List[Contact]:
        with _translate_errors("select_contacts"):
            return list(self.db.scalars(
                select(Contact)
                .where(Contact.employee_id == employee_id)
                .order_by(Contact.id)
            ))

    def insert_contacts(self, employee_id: int, contacts: Iterable) -> int:
        """Insert contact rows for an employee; items expose .type and .value"""
        rows = [
            Contact(employee_id=employee_id, type=contact.type, value=contact.value)
            for contact in contacts
        ]
        if not rows:
            return 0

        with _translate_errors("insert_contacts"):
            self.db.add_all(rows)
            self.db.flush()
        return len(rows)

    def update_employee(self, employee_id: int, **fields) -> int:
        """Update employee columns by id, returning rows affected"""
        values = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        values["updated_at"] = datetime.utcnow()

        with _translate_errors("update_employee"):
            result = self.db.execute(
                update(Employee)
                .where(Employee.id == employee_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount

    def delete_employee(self, employee_id: int) -> int:
        with _translate_errors("delete_employee"):
            result = self.db.execute(
                delete(Employee)
                .where(Employee.id == employee_id)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount

    def delete_contacts(self, employee_id: int) -> int:
        with _translate_errors("delete_contacts"):
            result = self.db.execute(
                delete(Contact)
                .where(Contact.employee_id == employee_id)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount

    def commit(self):
        with _translate_errors("commit"):
            self.db.commit()

    def rollback(self):
        with _translate_errors("rollback"):
            self.db.rollback()

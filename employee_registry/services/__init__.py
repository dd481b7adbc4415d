from .employees import EmployeeRepository, paginate

__all__ = ["EmployeeRepository", "paginate"]

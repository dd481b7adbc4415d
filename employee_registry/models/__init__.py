from .employee import ContactIn, Contact, EmployeeCreate, EmployeeSummary, EmployeeDetail

__all__ = ["ContactIn", "Contact", "EmployeeCreate", "EmployeeSummary", "EmployeeDetail"]

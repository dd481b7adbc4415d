from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import relationship
from datetime import datetime

Base = declarative_base()

class Employee(Base):
    __tablename__ = "employees"
    
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50))
    address = Column(String(255))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    contacts = relationship(
        "Contact",
        back_populates="employee",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Contact.id"
    )

class Contact(Base):
    __tablename__ = "contacts"
    
    id = Column(Integer, primary_key=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    
    # Free-form tag (phone, email, address...) and its value
    type = Column(String(50), nullable=False)
    value = Column(String(255), nullable=False)
    
    employee = relationship("Employee", back_populates="contacts")
    
    __table_args__ = (
        Index("ix_contacts_employee_id", "employee_id"),
    )

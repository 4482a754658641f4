from sqlalchemy import Column, String, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from ..core.database import Base, AuditMixin


class Company(AuditMixin, Base):
    """Company model, the root of the organisation tree"""
    __tablename__ = "companies"

    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)

    departments = relationship(
        "Department",
        back_populates="company",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Company(id={self.id}, name='{self.name}')>"


class Department(AuditMixin, Base):
    """Department model"""
    __tablename__ = "departments"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    company_id = Column(
        Uuid,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    company = relationship("Company", back_populates="departments")
    boards = relationship(
        "Board",
        back_populates="department",
        cascade="all, delete-orphan"
    )
    user_departments = relationship(
        "UserDepartment",
        back_populates="department",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Department(id={self.id}, name='{self.name}')>"

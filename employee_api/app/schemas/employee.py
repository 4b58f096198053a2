"""
Pydantic schemas for employee records.

Request models only coerce types, except that salary must be finite.
Fields missing from a create or update body fall back to their zero
value.  ``EmployeeRead`` is built straight from the store's records.
"""

from pydantic import BaseModel, ConfigDict, Field


class EmployeeCreate(BaseModel):
    """Schema for creating a new employee."""

    name: str = Field("", description="Employee full name")
    position: str = Field("", description="Job title")
    salary: float = Field(0.0, allow_inf_nan=False, description="Salary amount; must be finite")


class EmployeeUpdate(EmployeeCreate):
    """Schema for overwriting an existing employee.

    ``id`` selects the record; name, position and salary replace the
    stored values.
    """

    id: int = Field(..., description="Identifier of the employee to update")


class EmployeeRead(BaseModel):
    """Schema for reading an employee."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    position: str
    salary: float


class MessageResponse(BaseModel):
    """Plain message body, used for confirmations and errors."""

    message: str

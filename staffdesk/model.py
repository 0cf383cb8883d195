"""Employee records, the fields they are searched by, and search criteria."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from enum import Enum

_DIGITS = frozenset("0123456789")


class Field(Enum):
    """A column of an employee record; the value is the attribute name."""

    DEPARTMENT_ID = "department_id"
    DEPARTMENT_NAME = "department_name"
    EMPLOYEE_ID = "employee_id"
    FULL_NAME = "full_name"
    POSITION = "position"
    BIRTH_DATE = "birth_date"
    SALARY = "salary"


@dataclass(frozen=True)
class Employee:
    """One employee; the birth date is stored as ``dd|mm|yyyy``."""

    department_id: str
    department_name: str
    employee_id: str
    full_name: str
    position: str
    birth_date: str
    salary: float = 0.0


@dataclass
class SearchCriteria:
    """Conditions for a multi-criteria search; empty strings are ignored."""

    department_id: str = ""
    employee_id: str = ""
    full_name: str = ""
    position: str = ""
    birth_from: str = ""
    birth_to: str = ""
    salary_from: str = ""
    salary_to: str = ""

    def is_empty(self) -> bool:
        """Return True when no condition is set."""
        return not any(astuple(self))


def is_number(text: str) -> bool:
    """Return True for a non-empty string made only of ASCII digits."""
    return bool(text) and all(ch in _DIGITS for ch in text)


def format_birth_date(day: str, month: str, year: str) -> str:
    """Combine typed day, month and year into the stored ``dd|mm|yyyy`` form."""
    if not (is_number(day) and is_number(month) and is_number(year)):
        raise ValueError("day, month and year must be numbers")
    return f"{int(day):02d}|{int(month):02d}|{year.zfill(4)}"
"""Exact, multi-criteria and keyword search over employee lists."""

from __future__ import annotations

from collections.abc import Iterable

from .model import Employee, Field, SearchCriteria


def prepare_exact_value(field: Field, value: str) -> str:
    """Normalise a typed search value the way records store that field."""
    if field is Field.DEPARTMENT_ID:
        return value.upper()
    if field is Field.POSITION:
        return value[:1].upper() + value[1:]
    return value


def exact_match(employee: Employee, field: Field, value: str) -> bool:
    """Return True when the employee's field equals the value exactly."""
    if field is Field.SALARY:
        return float(value) == employee.salary
    return getattr(employee, field.value) == value


def exact_search(
    employees: Iterable[Employee], field: Field, value: str
) -> list[Employee]:
    """Return the employees whose field equals the normalised value."""
    wanted = prepare_exact_value(field, value)
    return [e for e in employees if exact_match(e, field, wanted)]


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def matches_criteria(employee: Employee, criteria: SearchCriteria) -> bool:
    """Return True when the employee satisfies every set condition."""
    partial = (
        (employee.department_id, criteria.department_id),
        (employee.employee_id, criteria.employee_id),
        (employee.full_name, criteria.full_name),
        (employee.position, criteria.position),
    )
    if any(needle and not _contains(text, needle) for text, needle in partial):
        return False
    if criteria.birth_from and employee.birth_date < criteria.birth_from:
        return False
    if criteria.birth_to and employee.birth_date > criteria.birth_to:
        return False
    if criteria.salary_from and employee.salary < float(criteria.salary_from):
        return False
    if criteria.salary_to and employee.salary > float(criteria.salary_to):
        return False
    return True


def criteria_search(
    employees: Iterable[Employee], criteria: SearchCriteria
) -> list[Employee]:
    """Return the employees that satisfy the criteria, in their original order."""
    return [e for e in employees if matches_criteria(e, criteria)]


def keyword_matches(employee: Employee, keyword: str) -> bool:
    """Return True when any field contains the keyword, ignoring case."""
    texts = (
        employee.department_id,
        employee.department_name,
        employee.employee_id,
        employee.full_name,
        employee.position,
        employee.birth_date,
    )
    if any(_contains(text, keyword) for text in texts):
        return True
    return keyword in str(int(employee.salary))


def quick_search(employees: Iterable[Employee], keyword: str) -> list[Employee]:
    """Return the employees that contain the keyword in any field."""
    return [e for e in employees if keyword_matches(e, keyword)]
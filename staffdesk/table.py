"""Paged employee tables and the highlighting of matched columns."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .model import Employee, Field, SearchCriteria
from .search import exact_match

ROWS_PER_PAGE = 20

_HEADER = (
    "STT | Phong ban           | Ma NV      | Ho ten                    "
    "| Chuc vu        | Ngay sinh  | Luong"
)
_RULE = (
    "----|---------------------|------------|---------------------------"
    "|----------------|------------|---------------"
)
_NAVIGATION = "<= Trang truoc    Trang sau =>    Thoat(ESC-ENTER)"


@dataclass(frozen=True)
class Highlight:
    """How one table row is highlighted.

    ``row`` marks the whole row as a match; ``fields`` names the displayed
    columns to emphasise. The department column is named by
    ``Field.DEPARTMENT_NAME`` since that is what it shows.
    """

    row: bool = False
    fields: frozenset[Field] = frozenset()


def page_count(total: int, per_page: int = ROWS_PER_PAGE) -> int:
    """Return how many pages ``total`` rows fill."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    return (total + per_page - 1) // per_page


def clamp_page(page: int, total_pages: int) -> int:
    """Bring a page number into ``1..total_pages``."""
    if page < 1:
        page = 1
    if page > total_pages:
        page = total_pages
    return page


def page_slice(
    employees: Sequence[Employee], page: int, per_page: int = ROWS_PER_PAGE
) -> list[Employee]:
    """Return the employees shown on the given page."""
    start = max((page - 1) * per_page, 0)
    return list(employees[start:start + per_page])


def table_header() -> str:
    """Return the two header lines of the employee table."""
    return f"{_HEADER}\n{_RULE}"


def format_row(number: int, employee: Employee) -> str:
    """Format one numbered employee as a table row."""
    return (
        f"{number:>4} | "
        f"{employee.department_name[:22]:<19} | "
        f"{employee.employee_id:>10} | "
        f"{employee.full_name[:20]:<25} | "
        f"{employee.position[:11]:<14} | "
        f"{employee.birth_date:>10} | "
        f"{employee.salary:>13.0f}"
    )


def render_table(
    employees: Sequence[Employee], page: int = 1, title: str = "DANH SACH NHAN VIEN"
) -> str:
    """Render one page of the employee table as text."""
    total = len(employees)
    pages = page_count(total)
    page = clamp_page(page, pages)
    first = max((page - 1) * ROWS_PER_PAGE, 0) + 1
    lines = [
        f"{title} - Tong: {total} - Trang {page}/{pages}",
        table_header(),
    ]
    lines.extend(
        format_row(number, employee)
        for number, employee in enumerate(page_slice(employees, page), start=first)
    )
    lines.append(_NAVIGATION)
    return "\n".join(lines)


def exact_highlights(employee: Employee, field: Field, value: str) -> Highlight:
    """Highlight for a row of an exact search on ``field``."""
    matched = exact_match(employee, field, value)
    columns: set[Field] = set()
    if field is Field.DEPARTMENT_ID and employee.department_id == value:
        columns.add(Field.DEPARTMENT_NAME)
    elif field in (Field.EMPLOYEE_ID, Field.FULL_NAME, Field.POSITION, Field.BIRTH_DATE):
        if getattr(employee, field.value) == value:
            columns.add(field)
    elif field is Field.SALARY and matched:
        columns.add(Field.SALARY)
    return Highlight(row=matched, fields=frozenset(columns))


def _contains(text: str, needle: str) -> bool:
    return needle.lower() in text.lower()


def criteria_highlights(employee: Employee, criteria: SearchCriteria) -> Highlight:
    """Highlight for a row of a multi-criteria search."""
    columns: set[Field] = set()
    partial = (
        (Field.DEPARTMENT_NAME, employee.department_id, criteria.department_id),
        (Field.EMPLOYEE_ID, employee.employee_id, criteria.employee_id),
        (Field.FULL_NAME, employee.full_name, criteria.full_name),
        (Field.POSITION, employee.position, criteria.position),
    )
    columns.update(
        column for column, text, needle in partial if needle and _contains(text, needle)
    )
    if (
        criteria.birth_from
        and employee.birth_date >= criteria.birth_from
        and (not criteria.birth_to or employee.birth_date <= criteria.birth_to)
    ):
        columns.add(Field.BIRTH_DATE)
    if (
        criteria.salary_from
        and employee.salary >= float(criteria.salary_from)
        and (not criteria.salary_to or employee.salary <= float(criteria.salary_to))
    ):
        columns.add(Field.SALARY)
    return Highlight(row=bool(columns), fields=frozenset(columns))


def keyword_highlights(employee: Employee, keyword: str) -> Highlight:
    """Highlight for a row of a keyword search over every column."""
    columns: set[Field] = set()
    if _contains(employee.department_name, keyword) or _contains(
        employee.department_id, keyword
    ):
        columns.add(Field.DEPARTMENT_NAME)
    for column in (Field.EMPLOYEE_ID, Field.FULL_NAME, Field.POSITION, Field.BIRTH_DATE):
        if _contains(getattr(employee, column.value), keyword):
            columns.add(column)
    if keyword in str(int(employee.salary)):
        columns.add(Field.SALARY)
    return Highlight(row=bool(columns), fields=frozenset(columns))


@dataclass
class Pager:
    """Walks the pages of an employee list, wrapping at both ends."""

    employees: Sequence[Employee]
    per_page: int = ROWS_PER_PAGE
    page: int = field(default=1)

    @property
    def total_pages(self) -> int:
        return page_count(len(self.employees), self.per_page)

    def next(self) -> int:
        """Move to the following page, wrapping to the first."""
        pages = self.total_pages
        if pages:
            self.page = self.page % pages + 1
        return self.page

    def previous(self) -> int:
        """Move to the preceding page, wrapping to the last."""
        pages = self.total_pages
        if pages:
            self.page = pages if self.page <= 1 else self.page - 1
        return self.page

    def items(self) -> list[Employee]:
        """Return the employees on the current page."""
        return page_slice(self.employees, self.page, self.per_page)
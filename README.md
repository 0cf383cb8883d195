# staffdesk

`staffdesk` is a library for employee records. It searches lists of records,
lays them out as paged text tables, and computes head-count and salary
statistics. Every rendering function returns plain text.

## Installing

```
pip install .
```

## Records

`staffdesk.model` defines the data types:

- `Employee` is a frozen dataclass. It holds `department_id`,
  `department_name`, `employee_id`, `full_name`, `position`, `birth_date`
  (stored as `dd|mm|yyyy`) and `salary`.
- `Field` is an enum of those columns. Each member's value is the attribute
  name on `Employee`.
- `SearchCriteria` holds the conditions for a multi-criteria search:
  `department_id`, `employee_id`, `full_name`, `position`, `birth_from`,
  `birth_to`, `salary_from` and `salary_to`. A condition left as an empty
  string is ignored. `is_empty()` returns True when no condition is set.

`is_number(text)` returns True for a non-empty string of ASCII digits.
`format_birth_date(day, month, year)` turns typed parts into the stored
`dd|mm|yyyy` form, with zero padding. It raises `ValueError` if any part is
not a number.

## Searching

`staffdesk.search` gives three kinds of search. Each returns a new list in the
order of the input.

- `exact_search(employees, field, value)` returns the records whose field
  equals the value. The value is first normalised by
  `prepare_exact_value`: department ids are upper-cased and a position's first
  letter is capitalised. Salaries are compared as numbers.
  `exact_match(employee, field, value)` tests a single record.
- `criteria_search(employees, criteria)` matches department id, employee id,
  name and position by substring, ignoring case. Birth dates are compared as
  stored text against `birth_from`/`birth_to`. Salaries are checked against
  `salary_from`/`salary_to`. Both bounds are inclusive.
  `matches_criteria(employee, criteria)` tests a single record.
- `quick_search(employees, keyword)` looks for the keyword in every text field,
  ignoring case, and in the whole-number salary.
  `keyword_matches(employee, keyword)` tests a single record.

## Tables

`staffdesk.table` lays records out in pages. A page holds 20 rows by default
(`ROWS_PER_PAGE`).

- `render_table(employees, page=1, title="DANH SACH NHAN VIEN")` returns one
  page as text: a title line with the total and page number, the header, the
  numbered rows and a navigation line.
- `page_count`, `clamp_page` and `page_slice` do the paging arithmetic.
  `table_header()` and `format_row(number, employee)` produce the individual
  lines.
- `Pager` steps through the pages of a list. `next()` and `previous()` wrap
  around at either end, and `items()` returns the records on the current page.
- `exact_highlights`, `criteria_highlights` and `keyword_highlights` each
  return a `Highlight`. It tells whether a row matched and which columns to
  emphasise, so that a front end can colour them. The department column is
  reported as `Field.DEPARTMENT_NAME`.

## Statistics

`staffdesk.statistics` provides:

- `count_by_department` and `count_by_position`. Each returns a dict of counts
  in order of first appearance.
- `salary_bands`, which counts salaries in five bands: under 3 million,
  3–5, 5–7, 7–10, and 10 million and above. The result is a list of
  `SalaryBand`.
- `salary_summary`, which returns a `SalarySummary` with the average, highest
  and lowest salary. It raises `ValueError` for an empty list.
- `salary_tier` and `salary_by_department`. They count each department's
  employees in the tiers named by `TIER_LABELS`, and the result is a list of
  `DepartmentSalaryRow`.
- `bar_length` and these text renderers: `render_count_table`,
  `render_bar_chart`, `render_pie_chart`, `render_salary_bands` and
  `render_salary_by_department`.

```python
from staffdesk.model import Employee, Field
from staffdesk.search import exact_search
from staffdesk.statistics import count_by_department, render_count_table

staff = [
    Employee("KT", "Ke toan", "NV01", "Nguyen Van A", "Nhan vien", "01|02|1990", 4500000),
    Employee("IT", "Cong nghe", "NV02", "Tran Thi B", "Truong phong", "15|07|1985", 12000000),
]
print(exact_search(staff, Field.DEPARTMENT_ID, "kt"))
counts = count_by_department(staff)
print(render_count_table("THONG KE THEO PHONG BAN", counts, len(staff)))
```

## What it does not do

`staffdesk` is a library only. It has no command, no interactive menu and no
keyboard handling. It does not read or write record files. Entering, editing,
deleting and sorting records are left to the calling program.

## Running the tests

```
pip install .[test]
pytest
```
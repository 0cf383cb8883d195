"""Head counts, salary bands and text charts over employee lists."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .model import Employee

COUNT_BAR_WIDTH = 46
BAND_BAR_WIDTH = 52
CHART_STEP = 3.333

BAR_EMPTY = "\u2591"
BAR_FULL = "\u2588"
COLUMN_MARK = "\u2580"
PIE_MARKS = "\u2588\u2593\u2592\u2591#@%&+="

TIER_LABELS = ("> 10tr", "5tr - 10tr", "3tr - 5tr", "1tr - 3tr", "< 1tr")

EMPTY_LIST = "Danh sach rong"

_PIE_SHAPE = (
    "      ****      ",
    "    ********    ",
    "   **********   ",
    "  ************  ",
    " ************** ",
    " ************** ",
    " ************** ",
    " ************** ",
    " ************** ",
    "  ************  ",
    "   **********   ",
    "    ********    ",
    "      ****      ",
)

_BAND_LIMITS = (
    (0.0, 3_000_000.0, "Duoi 3 trieu"),
    (3_000_000.0, 5_000_000.0, "3 - 5 trieu"),
    (5_000_000.0, 7_000_000.0, "5 - 7 trieu"),
    (7_000_000.0, 10_000_000.0, "7 - 10 trieu"),
    (10_000_000.0, 999_999_999.0, "Tren 10 trieu"),
)

_TIER_RULE = "------|------------|------------|------------|------------|------------|--------"


@dataclass(frozen=True)
class SalaryBand:
    """A salary range ``[low, high)`` and how many employees fall in it."""

    name: str
    low: float
    high: float
    count: int = 0


@dataclass(frozen=True)
class SalarySummary:
    """Average, highest and lowest salary of a non-empty list."""

    count: int
    average: float
    highest: float
    lowest: float


@dataclass(frozen=True)
class DepartmentSalaryRow:
    """Employees of one department counted per salary tier."""

    department_id: str
    counts: tuple[int, int, int, int, int]

    @property
    def total(self) -> int:
        return sum(self.counts)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _count_by(values: Iterable[str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def count_by_department(employees: Iterable[Employee]) -> dict[str, int]:
    """Count employees per department name, in order of first appearance."""
    return _count_by(e.department_name for e in employees)


def count_by_position(employees: Iterable[Employee]) -> dict[str, int]:
    """Count employees per position, in order of first appearance."""
    return _count_by(e.position for e in employees)


def salary_bands(employees: Iterable[Employee]) -> list[SalaryBand]:
    """Count employees in each of the five fixed salary bands."""
    counts = [0] * len(_BAND_LIMITS)
    for employee in employees:
        for index, (low, high, _name) in enumerate(_BAND_LIMITS):
            if low <= employee.salary < high:
                counts[index] += 1
                break
    return [
        SalaryBand(name, low, high, count)
        for (low, high, name), count in zip(_BAND_LIMITS, counts)
    ]


def salary_summary(employees: Iterable[Employee]) -> SalarySummary:
    """Return average, highest and lowest salary; the highest is never below 0."""
    salaries = [e.salary for e in employees]
    if not salaries:
        raise ValueError("the employee list is empty")
    return SalarySummary(
        count=len(salaries),
        average=sum(salaries) / len(salaries),
        highest=max(0.0, *salaries),
        lowest=min(salaries),
    )


def salary_tier(salary: float) -> int:
    """Return the index into ``TIER_LABELS`` for a salary."""
    if salary > 10_000_000:
        return 0
    if salary > 5_000_000:
        return 1
    if salary > 3_000_000:
        return 2
    if salary > 1_000_000:
        return 3
    return 4


def salary_by_department(employees: Iterable[Employee]) -> list[DepartmentSalaryRow]:
    """Count employees per department id and salary tier, in order of appearance."""
    tallies: dict[str, list[int]] = {}
    for employee in employees:
        tally = tallies.setdefault(employee.department_id, [0] * len(TIER_LABELS))
        tally[salary_tier(employee.salary)] += 1
    return [
        DepartmentSalaryRow(department_id, tuple(counts))  # type: ignore[arg-type]
        for department_id, counts in tallies.items()
    ]


def bar_length(count: int, total: int, width: int) -> int:
    """Return how many cells of a ``width`` wide bar ``count / total`` fills."""
    if total <= 0:
        raise ValueError("total must be positive")
    return _round_half_up(count / total * width)


def _bar(count: int, total: int, width: int) -> str:
    length = bar_length(count, total, width)
    return BAR_FULL * length + BAR_EMPTY * max(0, width - length)


def render_count_table(title: str, counts: Mapping[str, int], total: int) -> str:
    """Render a numbered table of group counts with a proportion bar per group."""
    if not counts:
        return f"{title}\n{EMPTY_LIST}"
    lines = [
        title,
        f"TONG SO NHAN VIEN: {total}",
        f" STT | {'Nhom':<26} | {'So nhan vien':<12} | Ty le",
        " ----|" + "-" * 28 + "|" + "-" * 14 + "|" + "-" * 58,
    ]
    for number, (name, count) in enumerate(counts.items(), start=1):
        bar = _bar(count, total, COUNT_BAR_WIDTH)
        percent = count / total * 100
        lines.append(
            f"{number:>4} | {name:<26} | {count:<12} | {bar}  {percent:.1f}%"
        )
    return "\n".join(lines)


class _Canvas:
    """A sparse text grid written to by position."""

    def __init__(self) -> None:
        self._rows: dict[int, list[str]] = {}

    def put(self, x: int, y: int, text: str) -> None:
        if y < 0:
            return
        row = self._rows.setdefault(y, [])
        end = x + len(text)
        if len(row) < end:
            row.extend(" " * (end - len(row)))
        for offset, char in enumerate(text):
            if x + offset >= 0:
                row[x + offset] = char

    def render(self) -> str:
        if not self._rows:
            return ""
        height = max(self._rows) + 1
        return "\n".join(
            "".join(self._rows.get(y, [])).rstrip() for y in range(height)
        )


def render_bar_chart(labels: Sequence[str], values: Sequence[int], total: int) -> str:
    """Render a column chart of each value's share of ``total``, lettered A, B, ..."""
    if len(labels) != len(values):
        raise ValueError("labels and values must have the same length")
    if values and total <= 0:
        raise ValueError("total must be positive")
    canvas = _Canvas()
    canvas.put(0, 0, "BIEU DO THONG KE PHAN BO NHAN VIEN")
    for step in range(16):
        canvas.put(5, 2 + step, f"{50 - step * CHART_STEP:>4.1f}% -")
    axis = 17
    canvas.put(10, axis, "-" * 100)

    for index, value in enumerate(values):
        column = 14 + index * 5
        percent = value / total * 100
        for level in range(_round_half_up(percent / CHART_STEP)):
            canvas.put(column, axis - level, COLUMN_MARK * 2)
        canvas.put(column, axis + 1, chr(ord("A") + index))
        shown = f"{percent:.1f}%" if percent < 1 else f"{percent:.0f}%"
        canvas.put(column - 1, axis + 2, shown)

    canvas.put(0, 20, "CHU THICH:")
    legend_x, legend_y = 0, 20
    for index, label in enumerate(labels):
        if index % 6 == 0:
            legend_x, legend_y = 8 * index, 22
        canvas.put(legend_x, legend_y, f"{chr(ord('A') + index)}: {label}")
        legend_y += 1

    canvas.put(0, axis + 4, f"{COLUMN_MARK * 2} So nhan vien")
    return canvas.render()


def _pie_line(shape: str, shares: Sequence[int], total: int) -> str:
    stars = shape.count("*")
    out: list[str] = []
    drawn = 0
    for index, share in enumerate(shares):
        wanted = _round_half_up(share / total * stars)
        if index == len(shares) - 1:
            wanted = stars - drawn
        mark = PIE_MARKS[index % len(PIE_MARKS)]
        drawn_here = 0
        for char in shape:
            if drawn_here >= wanted:
                break
            if char == "*":
                out.append(mark)
                drawn += 1
                drawn_here += 1
            elif drawn == 0:
                out.append(char)
    return "".join(out)


def render_pie_chart(data: Sequence[tuple[str, int]], total: int) -> str:
    """Render a round text chart of each entry's share, with a legend."""
    if total <= 0:
        raise ValueError("total must be positive")
    shares = [count for _name, count in data]
    lines = ["BIEU DO TY LE PHAN PHOI LUONG", ""]
    lines.extend(_pie_line(shape, shares, total).rstrip() for shape in _PIE_SHAPE)
    lines.extend([""] * 5)
    for index, (name, count) in enumerate(data):
        mark = PIE_MARKS[index % len(PIE_MARKS)]
        lines.append(f"{mark * 2} {name}: {count / total * 100:.1f}%")
    return "\n".join(lines)


def render_salary_bands(employees: Sequence[Employee]) -> str:
    """Render the salary band table followed by average, highest and lowest pay."""
    title = "THONG KE PHAN LOAI THEO MUC LUONG"
    if not employees:
        return f"{title}\n{EMPTY_LIST}"
    total = len(employees)
    lines = [
        title,
        f"TONG SO NHAN VIEN: {total}",
        " STT | Muc luong                  | So luong | Ty le   | Bieu do",
        " ----|----------------------------|----------|---------|" + "-" * 62,
    ]
    occupied = [band for band in salary_bands(employees) if band.count > 0]
    for number, band in enumerate(occupied, start=1):
        percent = band.count / total * 100
        lines.append(
            f"{number:>4} | {band.name:<26} | {band.count:>8} | {percent:>6.1f}% | "
            + _bar(band.count, total, BAND_BAR_WIDTH)
        )
    summary = salary_summary(employees)
    lines.extend(
        [
            "",
            "Thong ke them:",
            f"- Luong trung binh: {summary.average:.0f}",
            f"- Luong cao nhat: {summary.highest:.0f}",
            f"- Luong thap nhat: {summary.lowest:.0f}",
        ]
    )
    return "\n".join(lines)


def _tier_cells(counts: Sequence[int], total: int) -> str:
    return "".join(
        f" {count:>3} {(count * 100.0 / total if total else 0.0):>5.1f}% |"
        for count in counts
    )


def render_salary_by_department(employees: Sequence[Employee]) -> str:
    """Render per-department counts for each salary tier with a totals line."""
    title = "THONG KE PHAN LOAI NHAN VIEN THEO LUONG VA PHONG BAN"
    if not employees:
        return f"{title}\n{EMPTY_LIST}"
    rows = salary_by_department(employees)
    header_cells = "".join(f" {label:<10} |" for label in TIER_LABELS)
    lines = [
        title,
        "",
        f"Ma PB |{header_cells}  Tong",
        "      |" + " SL    %    |" * len(TIER_LABELS),
        _TIER_RULE,
    ]
    for row in rows:
        lines.append(
            f"{row.department_id:<6}|{_tier_cells(row.counts, row.total)} {row.total:>6}"
        )
    totals = [sum(row.counts[tier] for row in rows) for tier in range(len(TIER_LABELS))]
    grand_total = sum(totals)
    lines.extend(
        [
            "",
            _TIER_RULE,
            f"Tong  |{_tier_cells(totals, grand_total)} {grand_total:>6}",
        ]
    )
    return "\n".join(lines)
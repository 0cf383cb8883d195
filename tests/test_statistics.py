import pytest

from staffdesk.model import Employee
from staffdesk.statistics import (
    BAR_FULL,
    COUNT_BAR_WIDTH,
    PIE_MARKS,
    TIER_LABELS,
    DepartmentSalaryRow,
    SalaryBand,
    SalarySummary,
    bar_length,
    count_by_department,
    count_by_position,
    render_bar_chart,
    render_count_table,
    render_pie_chart,
    render_salary_bands,
    render_salary_by_department,
    salary_bands,
    salary_by_department,
    salary_summary,
    salary_tier,
)


def _emp(dep_id, dep_name, emp_id, position, salary):
    return Employee(dep_id, dep_name, emp_id, "Nguyen Van A", position, "01|01|1990", salary)


@pytest.fixture
def staff():
    return [
        _emp("KT", "Ke toan", "NV01", "Nhan vien", 2_500_000),
        _emp("KD", "Kinh doanh", "NV02", "Truong phong", 12_000_000),
        _emp("KT", "Ke toan", "NV03", "Nhan vien", 4_000_000),
        _emp("IT", "Cong nghe", "NV04", "Nhan vien", 8_000_000),
    ]


def test_count_by_department_keeps_first_seen_order(staff):
    counts = count_by_department(staff)
    assert list(counts) == ["Ke toan", "Kinh doanh", "Cong nghe"]
    assert sum(counts.values()) == len(staff)
    assert counts["Ke toan"] == 2


def test_count_by_position(staff):
    counts = count_by_position(staff)
    assert list(counts) == ["Nhan vien", "Truong phong"]
    assert sum(counts.values()) == len(staff)


def test_salary_bands_cover_all_in_range(staff):
    bands = salary_bands(staff)
    assert [b.name for b in bands] == [
        "Duoi 3 trieu", "3 - 5 trieu", "5 - 7 trieu", "7 - 10 trieu", "Tren 10 trieu",
    ]
    assert sum(b.count for b in bands) == len(staff)
    assert all(isinstance(b, SalaryBand) for b in bands)


def test_salary_bands_lower_bound_inclusive():
    bands = salary_bands([_emp("A", "A", "1", "x", 3_000_000)])
    hit = [b for b in bands if b.count]
    assert len(hit) == 1
    assert hit[0].name == "3 - 5 trieu"


def test_salary_bands_out_of_range_not_counted():
    bands = salary_bands([_emp("A", "A", "1", "x", -5)])
    assert all(b.count == 0 for b in bands)


def test_salary_summary(staff):
    summary = salary_summary(staff)
    salaries = [e.salary for e in staff]
    assert summary == SalarySummary(len(staff), sum(salaries) / len(staff), 12_000_000, 2_500_000)


def test_salary_summary_empty_raises():
    with pytest.raises(ValueError):
        salary_summary([])


@pytest.mark.parametrize(
    "salary, label",
    [
        (10_000_001, "> 10tr"),
        (10_000_000, "5tr - 10tr"),
        (5_000_000, "3tr - 5tr"),
        (3_000_000, "1tr - 3tr"),
        (1_000_000, "< 1tr"),
    ],
)
def test_salary_tier_boundaries(salary, label):
    assert TIER_LABELS[salary_tier(salary)] == label


def test_salary_by_department_rows(staff):
    rows = salary_by_department(staff)
    assert [r.department_id for r in rows] == ["KT", "KD", "IT"]
    assert sum(r.total for r in rows) == len(staff)
    assert all(r.total == sum(r.counts) for r in rows)
    kd = rows[1]
    assert kd.counts[salary_tier(12_000_000)] == kd.total


def test_department_row_total():
    row = DepartmentSalaryRow("X", (1, 0, 2, 0, 3))
    assert row.total == sum(row.counts)


def test_bar_length_bounds():
    assert bar_length(0, 7, COUNT_BAR_WIDTH) == 0
    assert bar_length(7, 7, COUNT_BAR_WIDTH) == COUNT_BAR_WIDTH
    assert bar_length(1, 2, 46) == 23


def test_bar_length_zero_total_raises():
    with pytest.raises(ValueError):
        bar_length(1, 0, 10)


def test_render_count_table(staff):
    counts = count_by_department(staff)
    text = render_count_table("THONG KE", counts, len(staff))
    lines = text.splitlines()
    assert lines[0] == "THONG KE"
    assert f"TONG SO NHAN VIEN: {len(staff)}" in text
    rows = [line for line in lines if "|" in line and "Ke toan" in line]
    assert len(rows) == 1
    assert rows[0].count(BAR_FULL) == bar_length(2, len(staff), COUNT_BAR_WIDTH)
    assert rows[0].endswith("50.0%")


def test_render_count_table_empty():
    assert render_count_table("T", {}, 0).endswith("Danh sach rong")


def test_render_bar_chart_taller_column_for_larger_share():
    text = render_bar_chart(["a", "b"], [1, 3], 4)
    lines = text.splitlines()
    col_a = sum(1 for line in lines if line[14:16] == "\u2580\u2580")
    col_b = sum(1 for line in lines if line[19:21] == "\u2580\u2580")
    assert col_b > col_a > 0


def test_render_bar_chart_mismatched_lengths():
    with pytest.raises(ValueError):
        render_bar_chart(["a"], [1, 2], 3)


def test_render_pie_chart_segments_fill_each_line():
    single = render_pie_chart([("A", 4)], 4).splitlines()[2:15]
    split = render_pie_chart([("A", 1), ("B", 3)], 4).splitlines()[2:15]
    for one, two in zip(single, split):
        assert set(one.strip()) == {PIE_MARKS[0]}
        assert len(two.strip()) == len(one.strip())


def test_render_pie_chart_legend():
    text = render_pie_chart([("Duoi 3 trieu", 1), ("3 - 5 trieu", 1)], 2)
    assert "Duoi 3 trieu: 50.0%" in text
    assert text.splitlines()[0] == "BIEU DO TY LE PHAN PHOI LUONG"


def test_render_pie_chart_zero_total_raises():
    with pytest.raises(ValueError):
        render_pie_chart([], 0)


def test_render_salary_bands(staff):
    text = render_salary_bands(staff)
    assert "THONG KE PHAN LOAI THEO MUC LUONG" in text
    assert "5 - 7 trieu" not in text
    assert "Tren 10 trieu" in text
    assert "- Luong cao nhat: 12000000" in text
    assert "- Luong thap nhat: 2500000" in text


def test_render_salary_bands_empty():
    assert render_salary_bands([]).endswith("Danh sach rong")


def test_render_salary_by_department(staff):
    text = render_salary_by_department(staff)
    lines = text.splitlines()
    assert lines[-1].startswith("Tong  |")
    assert lines[-1].endswith(str(len(staff)))
    for dep in ("KT", "KD", "IT"):
        assert any(line.startswith(dep) for line in lines)
    kd_line = next(line for line in lines if line.startswith("KD"))
    assert "100.0%" in kd_line


def test_render_salary_by_department_empty():
    assert render_salary_by_department([]).endswith("Danh sach rong")
"""Excel workbook export for score reports."""

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from .report import ReportData


# Styles
HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
SECTION_FILL = PatternFill(start_color="5B9BD5", end_color="5B9BD5", fill_type="solid")
AVG_FILL = PatternFill(start_color="FFE699", end_color="FFE699", fill_type="solid")
WARN_FILL = PatternFill(start_color="F4B183", end_color="F4B183", fill_type="solid")
CENTER_ALIGN = Alignment(horizontal="center", vertical="center")
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin")
)
SCORE_FORMAT = "0.00"


def _header_row(ws, row: int, titles: list[str], fill: PatternFill = HEADER_FILL):
    for c, title in enumerate(titles, 1):
        cell = ws.cell(row=row, column=c, value=title)
        cell.font = HEADER_FONT
        cell.fill = fill
        cell.alignment = CENTER_ALIGN
        cell.border = THIN_BORDER


def _body_cell(ws, row: int, column: int, value, number_format: str | None = None):
    cell = ws.cell(row=row, column=column, value=value)
    cell.alignment = CENTER_ALIGN
    cell.border = THIN_BORDER
    if number_format:
        cell.number_format = number_format
    return cell


def create_rankings_sheet(ws, data: ReportData):
    """Create a sheet with one Rank/EmpID/Score block per dimension."""
    row = 1
    for dim, entries in data.rankings.items():
        # --- Section title (merged) ---
        ws.cell(row=row, column=1, value=f"Top {data.top_n} for {dim.title}")
        for c in range(1, 4):
            ws.cell(row=row, column=c).font = HEADER_FONT
            ws.cell(row=row, column=c).fill = SECTION_FILL
            ws.cell(row=row, column=c).alignment = CENTER_ALIGN
            ws.cell(row=row, column=c).border = THIN_BORDER
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=3)
        row += 1

        _header_row(ws, row, ["Rank", "EmpID", "Score"])
        row += 1

        for entry in entries:
            _body_cell(ws, row, 1, entry.rank)
            _body_cell(ws, row, 2, entry.student_id)
            _body_cell(ws, row, 3, round(entry.score, 2), SCORE_FORMAT)
            row += 1

        row += 1

    ws.column_dimensions[get_column_letter(1)].width = 8
    ws.column_dimensions[get_column_letter(2)].width = 20
    ws.column_dimensions[get_column_letter(3)].width = 12


def create_averages_sheet(ws, data: ReportData):
    """Create a sheet with the overall average followed by one row per branch."""
    _header_row(ws, 1, ["Branch", "Name", "Students", "Average"])

    overall = None if data.overall_average is None else round(data.overall_average, 2)
    _body_cell(ws, 2, 1, "All")
    _body_cell(ws, 2, 2, "Overall")
    _body_cell(ws, 2, 3, data.record_count)
    _body_cell(ws, 2, 4, overall if overall is not None else "n/a", SCORE_FORMAT)
    for c in range(1, 5):
        ws.cell(row=2, column=c).fill = AVG_FILL
        ws.cell(row=2, column=c).font = Font(bold=True)

    for i, branch in enumerate(data.branch_averages):
        row = 3 + i
        average = "n/a" if branch.average is None else round(branch.average, 2)
        _body_cell(ws, row, 1, branch.code)
        _body_cell(ws, row, 2, branch.name)
        _body_cell(ws, row, 3, branch.count)
        _body_cell(ws, row, 4, average, SCORE_FORMAT)

    ws.column_dimensions[get_column_letter(1)].width = 10
    ws.column_dimensions[get_column_letter(2)].width = 20
    ws.column_dimensions[get_column_letter(3)].width = 10
    ws.column_dimensions[get_column_letter(4)].width = 12


def create_diagnostics_sheet(ws, data: ReportData):
    """List rejected and flagged rows."""
    _header_row(ws, 1, ["Row", "Issue", "Detail"], fill=WARN_FILL)

    for i, diag in enumerate(data.diagnostics):
        row = 2 + i
        _body_cell(ws, row, 1, int(diag["row"]))
        _body_cell(ws, row, 2, diag["type"])
        ws.cell(row=row, column=3, value=diag["message"]).border = THIN_BORDER

    ws.column_dimensions[get_column_letter(1)].width = 8
    ws.column_dimensions[get_column_letter(2)].width = 18
    ws.column_dimensions[get_column_letter(3)].width = 50


def generate_workbook(data: ReportData) -> Workbook:
    """
    Generate the Excel workbook for a report.

    Args:
        data: Assembled report data

    Returns:
        openpyxl Workbook object
    """
    wb = Workbook()

    # Remove default sheet
    wb.remove(wb.active)

    create_rankings_sheet(wb.create_sheet(title="Top Students"), data)
    create_averages_sheet(wb.create_sheet(title="Averages"), data)

    if data.diagnostics:
        create_diagnostics_sheet(wb.create_sheet(title="Diagnostics"), data)

    return wb

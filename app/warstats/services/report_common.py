"""Turn ranked member stats into display rows and tables.

No network calls, no logging.
"""
from html import escape
from typing import Iterable

from ..models.member import MemberStats

# upstream calls these Attacked / Stalemate / Lost
REPORT_COLUMNS = [
    "Member",
    "Attacks",
    "Leave",
    "Mug",
    "Hosp",
    "Assist",
    "Draw",
    "Escape",
    "Loss",
    "Respect",
]


def build_report_rows(members: Iterable[MemberStats]) -> list[list]:
    return [
        [
            m.name,
            m.attacks,
            m.attacked,
            m.mugged,
            m.hospitalized,
            m.assist,
            m.stalemate,
            m.escape,
            m.lost,
            f"{m.respect:.2f}",
        ]
        for m in members
    ]


def make_table(headers, rows, rank=False):
    """
    Fixed-width table for terminal output.

    The first column (member name) is left-aligned, the stat columns are
    right-aligned. With ``rank`` a leading position column is added.
    """
    if not rows:
        return "No members with ranked war hits."

    if rank:
        headers = ["#", *headers]
        rows = [[pos, *row] for pos, row in enumerate(rows, start=1)]

    cells = [[str(c) for c in row] for row in rows]
    widths = [max(len(h), *(len(r[i]) for r in cells)) for i, h in enumerate(headers)]
    text_col = 1 if rank else 0

    def fmt_row(row):
        return "  ".join(
            cell.ljust(widths[i]) if i == text_col else cell.rjust(widths[i])
            for i, cell in enumerate(row)
        )

    rule = "  ".join("-" * w for w in widths)
    return "\n".join([fmt_row(headers), rule, *(fmt_row(r) for r in cells)])


def render_html_table(rows) -> str:
    head = "".join(f"<th>{escape(h)}</th>" for h in REPORT_COLUMNS)
    body = "\n".join(
        "<tr>" + "".join(f"<td>{escape(str(cell))}</td>" for cell in row) + "</tr>"
        for row in rows
    )
    return (
        '<table id="report-table">\n'
        f"<thead><tr>{head}</tr></thead>\n"
        f'<tbody id="report-table-body">\n{body}\n</tbody>\n'
        "</table>"
    )

"""
Render paginated QC records into a standalone, print-ready HTML document.

Each page holds two side-by-side tables (``#``, ``Column B``, ``Column C``).
Blank slots render as empty rows so every printed page has the same grid.
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape
from pathlib import Path

from ..models.page import Page, Slot
from ..models.record import RankedRecord

COLUMN_HEADERS = ("#", "Column B", "Column C")

PRINT_CSS = """
body { font-family: Arial, sans-serif; margin: 0; }
.page { display: block; padding: 8mm; }
.page-break { page-break-before: always; break-before: page; }
.page-content { display: flex; gap: 6mm; }
.table-container { flex: 1; }
.print-table { width: 100%; border-collapse: collapse; table-layout: fixed; font-size: 8pt; }
.print-table th, .print-table td { border: 1px solid #000; padding: 1px 3px; height: 4.2mm;
  white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
.col-number { width: 10%; text-align: right; }
.col-data { width: 45%; }
@page { size: A4 portrait; margin: 5mm; }
@media print { .no-print { display: none; } .page { padding: 0; } }
""".strip()


def _render_slot(slot: Slot) -> str:
    if not isinstance(slot, RankedRecord):
        return (
            '<tr><td class="col-number">&nbsp;</td>'
            '<td class="col-data">&nbsp;</td>'
            '<td class="col-data">&nbsp;</td></tr>'
        )
    b = escape(slot.column_b)
    c = escape(slot.column_c)
    return (
        f'<tr><td class="col-number">{slot.sequence_number}</td>'
        f'<td class="col-data" title="{b}">{b}</td>'
        f'<td class="col-data" title="{c}">{c}</td></tr>'
    )


def render_column_html(column: Sequence[Slot]) -> str:
    """Render one page column as an HTML ``<table>`` string."""
    parts: list[str] = ['<div class="table-container"><table class="print-table"><thead><tr>']
    parts.append('<th class="col-number">#</th>')
    for header in COLUMN_HEADERS[1:]:
        parts.append(f'<th class="col-data">{escape(header)}</th>')
    parts.append("</tr></thead><tbody>")
    parts.extend(_render_slot(slot) for slot in column)
    parts.append("</tbody></table></div>")
    return "".join(parts)


def render_page_html(page: Page) -> str:
    css_class = "page page-break" if page.number > 1 else "page"
    return (
        f'<div class="{css_class}" data-page="{page.number}"><div class="page-content">'
        f"{render_column_html(page.left_column)}"
        f"{render_column_html(page.right_column)}"
        "</div></div>"
    )


def render_pages_html(pages: Sequence[Page], title: str = "QC Print") -> str:
    """
    Render all pages into a complete HTML document.

    An empty page list still produces a valid document with no pages.
    """
    body = "\n".join(render_page_html(p) for p in pages)
    t = escape(title)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{t}</title><style>{PRINT_CSS}</style></head>\n"
        f'<body><div class="no-print"><h1>{t}</h1><p>{len(pages)} page(s)</p></div>\n'
        f'<div class="print-view">\n{body}\n</div></body></html>\n'
    )


def write_print_html(pages: Sequence[Page], path: Path, title: str = "QC Print") -> Path:
    """Write the rendered document to ``path`` (UTF-8), creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_pages_html(pages, title), encoding="utf-8")
    return path

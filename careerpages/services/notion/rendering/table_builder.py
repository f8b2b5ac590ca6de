"""
Table rendering for Notion `table` blocks.

A table block carries only layout flags; its rows arrive as `table_row`
children, each holding one rich-text list per cell. Callers fetch the rows and
hand them in together with an inline renderer for the cell text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

from markupsafe import Markup

from ..models import BlockBase, RichText
from ..models.blocks import TableBlock, TableRowBlock

CellRenderer = Callable[[List[RichText]], Markup]


def table_rows_of(children: Sequence[BlockBase]) -> List[TableRowBlock]:
    """Keep only row-typed children, in order."""
    return [c for c in children if isinstance(c, TableRowBlock)]


@dataclass
class TableBuilder:
    rows: List[TableRowBlock]
    render_cell_cb: CellRenderer
    has_column_header: bool = False
    has_row_header: bool = False
    css_class: str = "ntn-table"

    @property
    def head(self) -> List[TableRowBlock]:
        return self.rows[:1] if self.has_column_header else []

    @property
    def body(self) -> List[TableRowBlock]:
        return self.rows[1:] if self.has_column_header else list(self.rows)

    def _render_row(self, row: TableRowBlock, *, in_head: bool) -> Markup:
        cells: List[Markup] = []
        for idx, cell in enumerate(row.table_row.cells):
            inner = self.render_cell_cb(cell)
            if in_head:
                cells.append(Markup('<th scope="col">{}</th>').format(inner))
            elif self.has_row_header and idx == 0:
                cells.append(Markup('<th scope="row">{}</th>').format(inner))
            else:
                cells.append(Markup("<td>{}</td>").format(inner))
        return Markup("<tr>{}</tr>").format(Markup("").join(cells))

    def render_html_table(self) -> Markup:
        thead = Markup("")
        if self.head:
            thead = Markup("<thead>{}</thead>").format(
                self._render_row(self.head[0], in_head=True)
            )
        tbody = Markup("<tbody>{}</tbody>").format(
            Markup("").join(self._render_row(r, in_head=False) for r in self.body)
        )
        return Markup('<table class="{}">{}{}</table>').format(
            self.css_class, thead, tbody
        )


def render_table(
    table: TableBlock,
    children: Sequence[BlockBase],
    render_cell_cb: CellRenderer,
    css_class: str = "ntn-table",
) -> Markup:
    tb = TableBuilder(
        rows=table_rows_of(children),
        render_cell_cb=render_cell_cb,
        has_column_header=table.table.has_column_header,
        has_row_header=table.table.has_row_header,
        css_class=css_class,
    )
    return tb.render_html_table()

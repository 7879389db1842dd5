"""Renders Standings into the ``<tbody>`` of an existing ``<table>``.

Column order: rank, crest, name, wins, draws, losses, goals, points.
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional

from bs4 import BeautifulSoup, Tag

from league_table.core.errors import RenderTargetMissing
from league_table.entities.standing import Standing

logger = logging.getLogger(__name__)

_tags = BeautifulSoup("", "lxml")


def create_cell_for_value(value: Any = None) -> Tag:
    """A ``<td>`` holding *value* as text; ``None`` gives an empty cell."""
    cell = _tags.new_tag("td")
    cell.string = "" if value is None else str(value)
    return cell


def create_cell_for_image(src: str) -> Tag:
    cell = _tags.new_tag("td")
    cell.append(_tags.new_tag("img", src=src))
    return cell


def create_row_for_standing(standing: Standing) -> Tag:
    row = _tags.new_tag("tr")
    row.append(create_cell_for_value(standing.rank))
    row.append(create_cell_for_image(standing.crest_url))
    row.append(create_cell_for_value(standing.name))
    row.append(create_cell_for_value(standing.wins))
    row.append(create_cell_for_value(standing.draws))
    row.append(create_cell_for_value(standing.losses))
    row.append(create_cell_for_value(standing.goals))
    row.append(create_cell_for_value(standing.points))
    return row


class TableView:
    """The visible league table, bound to one ``<table>`` element."""

    def __init__(self, el: Optional[Tag]) -> None:
        self.el = el

    def body(self) -> Tag:
        if self.el is None:
            raise RenderTargetMissing("No table element bound to this view")
        tbody = self.el.find("tbody")
        if tbody is None:
            raise RenderTargetMissing("Table element has no <tbody>")
        assert isinstance(tbody, Tag)
        return tbody

    def show(self, standings: Iterable[Standing]) -> None:
        """Replace everything in the table body with one row per standing."""
        tbody = self.body()
        tbody.clear()
        count = 0
        for standing in standings:
            tbody.append(create_row_for_standing(standing))
            count += 1
        logger.debug("Rendered %d table rows", count)

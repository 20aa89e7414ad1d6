"""sectioned_list types.

SectionedListData: data blob, section IDs and row IDs for one formatted list.
row_id / parse_row_id: build and split "<section>,<row>" row IDs.
"""

import dataclasses
import re

from sectioned_list.exceptions import RowIdError

ROW_ID_SEPARATOR = ","

_ROW_ID_RE = re.compile(r"(0|[1-9][0-9]*),(0|[1-9][0-9]*)")


def row_id(section: int, row: int) -> str:
    """Build the row ID for row number `row` of section number `section`."""
    return f"{section}{ROW_ID_SEPARATOR}{row}"


def parse_row_id(text: str) -> tuple[int, int]:
    """Split a row ID back into its (section, row) pair."""
    match = _ROW_ID_RE.fullmatch(str(text))
    if match is None:
        raise RowIdError(f"Invalid row ID: {text!r}")
    return int(match.group(1)), int(match.group(2))


@dataclasses.dataclass
class SectionedListData:
    """The three structures a sectioned list widget is built from.

    data_blob maps section IDs (int) and row IDs (str) to display values.
    section_ids lists section IDs in order. row_ids[i] lists the row IDs of
    section i in order.
    """
    data_blob: dict = dataclasses.field(default_factory=dict)
    section_ids: list = dataclasses.field(default_factory=list)
    row_ids: list = dataclasses.field(default_factory=list)

    def __iter__(self):
        return iter((self.data_blob, self.section_ids, self.row_ids))

    @property
    def section_count(self) -> int:
        return len(self.section_ids)

    @property
    def row_count(self) -> int:
        return sum(len(rows) for rows in self.row_ids)

    def sections(self):
        """Yield (section_value, row_values) pairs in display order."""
        for section_id, rows in zip(self.section_ids, self.row_ids):
            yield self.data_blob[section_id], [self.data_blob[r] for r in rows]

    def to_dict(self) -> dict:
        """Return the structures under the key names the list widget uses."""
        return {
            "dataBlob": dict(self.data_blob),
            "sectionIDs": list(self.section_ids),
            "rowIDs": [list(rows) for rows in self.row_ids],
        }

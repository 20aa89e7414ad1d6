"""sectioned_list: data blob, section IDs and row IDs for sticky-header lists."""

from sectioned_list.formatter import format_sections, format_with_comparer
from sectioned_list.grouping import group_by, group_consecutive, get_grouper
from sectioned_list.types import SectionedListData, row_id, parse_row_id
from sectioned_list.config import get_config
from sectioned_list.log import log
from sectioned_list.exceptions import (
    SectionedListError,
    SectionedListConfigError,
    RowIdError,
)

__all__ = [
    "format_sections", "format_with_comparer",
    "group_by", "group_consecutive", "get_grouper",
    "SectionedListData", "row_id", "parse_row_id",
    "get_config", "log",
    "SectionedListError", "SectionedListConfigError", "RowIdError",
]

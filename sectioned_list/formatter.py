"""Sectioned list formatter.

Turns a flat list of records into the data blob, section IDs and row IDs used
to build a list view with sticky section headers.
"""

from sectioned_list.grouping import field_getter, group_by
from sectioned_list.log import debug
from sectioned_list.types import SectionedListData, row_id


def format_sections(records, get_section_key, get_section_value, get_row_value,
                    section_keys_equal=None, grouper=None,
                    verbose=False) -> SectionedListData:
    """Group records into sections and assign section and row IDs.

    Sections are numbered from 0 in the order their key first appears. Each
    section's header value comes from its first record; every record becomes
    one row with ID "<section>,<row>". Selectors may be callables or field
    names. Exceptions from selectors, section_keys_equal or grouper propagate
    unchanged.

    grouper defaults to group_by. verbose logs a one-line summary.
    """
    if grouper is None:
        grouper = group_by
    section_value_of = field_getter(get_section_value)
    row_value_of = field_getter(get_row_value)

    if section_keys_equal is None:
        groups = grouper(records, get_section_key)
    else:
        groups = grouper(records, get_section_key, section_keys_equal)

    result = SectionedListData()
    for section, group in enumerate(groups):
        result.data_blob[section] = section_value_of(group[0])
        rows = []
        for row, record in enumerate(group):
            rid = row_id(section, row)
            result.data_blob[rid] = row_value_of(record)
            rows.append(rid)
        result.row_ids.append(rows)
        result.section_ids.append(section)

    debug(f"Formatted {result.row_count} rows into {result.section_count} sections", verbose=verbose)
    return result


def format_with_comparer(records, section_selector, section_comparer,
                         row_selector) -> SectionedListData:
    """Format records where one selector gives both the section key and header.

    section_comparer(a, b) decides whether two section values belong to the
    same section.
    """
    return format_sections(
        records,
        section_selector,
        section_selector,
        row_selector,
        section_keys_equal=section_comparer,
    )

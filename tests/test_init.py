"""Tests for sectioned_list public API surface."""

import sectioned_list


def test_format_sections_is_callable():
    assert callable(sectioned_list.format_sections)


def test_format_with_comparer_is_callable():
    assert callable(sectioned_list.format_with_comparer)


def test_groupers_accessible():
    assert sectioned_list.get_grouper("stable") is sectioned_list.group_by
    assert sectioned_list.get_grouper("consecutive") is sectioned_list.group_consecutive


def test_log_is_callable():
    assert callable(sectioned_list.log)


def test_exception_classes_accessible():
    assert issubclass(sectioned_list.SectionedListConfigError, sectioned_list.SectionedListError)
    assert issubclass(sectioned_list.RowIdError, sectioned_list.SectionedListError)


def test_end_to_end_contacts():
    contacts = [
        {"name": "Bob", "initial": "B"},
        {"name": "Ann", "initial": "A"},
        {"name": "Bea", "initial": "B"},
    ]
    result = sectioned_list.format_sections(contacts, "initial", "initial", "name")
    data_blob, section_ids, row_ids = result
    assert section_ids == [0, 1]
    assert row_ids == [["0,0", "0,1"], ["1,0"]]
    for rows in row_ids:
        for rid in rows:
            section, row = sectioned_list.parse_row_id(rid)
            assert section in section_ids
            assert rows[row] == rid
    assert data_blob["0,1"] == "Bea"

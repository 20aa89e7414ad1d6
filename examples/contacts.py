import sectioned_list
from dataclasses import dataclass

@dataclass
class Contact:
    name: str
    company: str
contacts = [
    Contact("Ada Lovelace", "Analytical Engines"),
    Contact("Grace Hopper", "Navy"),
    Contact("Charles Babbage", "Analytical Engines"),
    Contact("Alan Turing", "Bletchley Park"),
    Contact("Joan Clarke", "Bletchley Park"),
]
result = sectioned_list.format_sections(contacts, "company", "company", "name")
print("================================")
print("  CONTACTS BY COMPANY")
print("================================")
for section_id, row_ids in zip(result.section_ids, result.row_ids):
    print("")
    print(f"{result.data_blob[section_id]}")
    for rid in row_ids:
        print(f"  [{rid}] {result.data_blob[rid]}")
print("")
sectioned_list.log(f"{result.section_count} sections, {result.row_count} rows")

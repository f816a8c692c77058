"""Property mappings for the library domain."""
from __future__ import annotations

from librarium.application.sorting import (
    PropertyMapping,
    PropertyMappingService,
    PropertyMappingValue,
)
from librarium.library.dto import AuthorDto
from librarium.library.entities import Author

# AuthorDto key -> Author fields. An older author has an earlier birth date,
# hence the reverted direction for Age.
AUTHOR_PROPERTY_MAPPING = PropertyMapping(
    {
        "Id": [PropertyMappingValue("id")],
        "Genre": [PropertyMappingValue("genre")],
        "Age": [PropertyMappingValue("date_of_birth", revert=True)],
        "Name": [PropertyMappingValue("first_name"), PropertyMappingValue("last_name")],
    }
)


def default_property_mappings() -> PropertyMappingService:
    return PropertyMappingService({(AuthorDto, Author): AUTHOR_PROPERTY_MAPPING})


__all__ = ["AUTHOR_PROPERTY_MAPPING", "default_property_mappings"]

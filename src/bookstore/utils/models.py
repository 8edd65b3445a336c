# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance
# with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND,
# either express or implied. See the License for the specific
# language governing permissions and limitations under the License.

"""
Book record dataclass and the mapping between the public API field
names and the field names stored in the collection.
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional

# Public API name -> stored document name
FIELD_MAP: Dict[str, str] = {
    "id": "id",
    "title": "bookname",
    "author": "bookauthor",
    "edition": "bookedition",
    "pages": "bookpages",
    "year": "bookyear",
}

# Fields a partial update may touch; "id" is never updatable.
UPDATABLE_FIELDS = ("title", "pages", "author", "edition", "year")

REQUIRED_FIELDS = ("id", "title", "author")


class InvalidBookError(ValueError):
    """Raised when a payload cannot be turned into a Book."""


class MissingFieldsError(InvalidBookError):
    """Raised when one of the mandatory fields is missing or empty."""


@dataclass
class Book:
    """
    A single book record, keyed by the user supplied ``id``.

    Attributes:
        id (str): Application level identifier, expected to be unique.
        title (str): Book title.
        author (str): Book author.
        edition (str): Edition, usually an ISBN.
        pages (str): Page count, stored as a string.
        year (str): Publication year, stored as a string.
    """

    id: str
    title: str
    author: str
    edition: str = ""
    pages: str = ""
    year: str = ""

    @classmethod
    def from_dict(cls, payload) -> "Book":
        """
        Build a Book from a public API payload.

        Unknown keys are ignored. Every known key must hold a string.

        Raises:
            InvalidBookError: payload is not a mapping or has a non-string
                value for a known field.
            MissingFieldsError: id, title or author is missing or empty.
        """
        if not isinstance(payload, dict):
            raise InvalidBookError("Invalid request body")

        values = {}
        for name in FIELD_MAP:
            value = payload.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise InvalidBookError("Invalid request body")
            values[name] = value

        if any(not values.get(name) for name in REQUIRED_FIELDS):
            raise MissingFieldsError(
                "Missing mandatory fields: 'id', 'title', or 'author'")
        return cls(**values)

    @classmethod
    def from_document(cls, document: dict) -> "Book":
        """
        Build a Book from a stored document. The storage ``_id`` is dropped.
        """
        return cls(**{
            name: _as_text(document.get(stored))
            for name, stored in FIELD_MAP.items()
        })

    def to_document(self) -> dict:
        """Returns the document as it is written to the collection."""
        return {
            FIELD_MAP[f.name]: getattr(self, f.name) for f in fields(self)
        }

    def to_dict(self) -> dict:
        """Returns the public representation used by every read path."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _as_text(value: Optional[object]) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def translate_updates(changes: dict) -> dict:
    """
    Translate a public partial update into stored field names.

    Only UPDATABLE_FIELDS are kept; anything else, including ``id`` and
    ``_id``, is dropped.
    """
    return {
        FIELD_MAP[name]: changes[name]
        for name in UPDATABLE_FIELDS
        if name in changes
    }

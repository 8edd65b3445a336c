# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

""" Data access for the book collection """
import logging
from typing import Dict, List

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from bookstore.utils.models import Book, translate_updates

logger = logging.getLogger(__name__)


class BookStoreError(Exception):
    """Base class for data access errors."""


class BookNotFoundError(BookStoreError):
    """No record matches the requested id."""


class BookConflictError(BookStoreError):
    """A record with the same id already exists."""


class StorageError(BookStoreError):
    """The driver failed to execute an operation."""


class BookRepository:
    """
    Thin wrapper over a single MongoDB collection of books.

    Every read goes through ``Book.from_document`` so that all callers see
    the same public field names. Driver errors are re-raised as
    StorageError; nothing is retried.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def _find_books(self) -> List[Book]:
        try:
            documents = list(self.collection.find({}))
        except PyMongoError as e:
            logger.error("Failed to list books: %s", e)
            raise StorageError("Failed to retrieve books") from e
        return [Book.from_document(document) for document in documents]

    def find_all_books(self) -> List[Dict[str, str]]:
        """Returns every record in natural order."""
        return [book.to_dict() for book in self._find_books()]

    def find_all_authors(self) -> List[Dict[str, str]]:
        """Returns one ``{"author": ...}`` entry per record."""
        return [{"author": book.author} for book in self._find_books()]

    def find_all_years(self) -> List[Dict[str, str]]:
        """Returns one ``{"year": ...}`` entry per record."""
        return [{"year": book.year} for book in self._find_books()]

    def find_book(self, book_id: str) -> Dict[str, str]:
        """
        Look up a record by its ``id`` field.

        Raises:
            BookNotFoundError: no record has this id.
            StorageError: the query failed.
        """
        try:
            document = self.collection.find_one({"id": book_id})
        except PyMongoError as e:
            logger.error("Failed to retrieve book %s: %s", book_id, e)
            raise StorageError("Failed to retrieve book") from e
        if document is None:
            raise BookNotFoundError(book_id)
        return Book.from_document(document).to_dict()

    def insert_book(self, book: Book) -> str:
        """
        Store a new record and return the storage assigned identifier.

        The duplicate check and the insert are two separate operations, so
        concurrent inserts of the same id can both succeed.

        Raises:
            BookConflictError: a record with this id already exists.
            StorageError: the check or the insert failed.
        """
        try:
            count = self.collection.count_documents({"id": book.id})
        except PyMongoError as e:
            logger.error("Failed to check for existing book %s: %s", book.id, e)
            raise StorageError("Failed to check for existing book") from e
        if count > 0:
            raise BookConflictError(book.id)

        try:
            result = self.collection.insert_one(book.to_document())
        except PyMongoError as e:
            logger.error("Failed to insert book %s: %s", book.id, e)
            raise StorageError("Failed to insert book") from e
        logger.info("Inserted book %s as %s", book.id, result.inserted_id)
        return str(result.inserted_id)

    def update_book(self, book_id: str, changes: dict) -> None:
        """
        Apply a partial update to the record with this id.

        Only title, pages, author, edition and year are applied; other keys
        are ignored.

        Raises:
            BookNotFoundError: no record has this id.
            StorageError: the update failed.
        """
        updates = translate_updates(changes)
        try:
            if updates:
                result = self.collection.update_one(
                    {"id": book_id}, {"$set": updates})
                matched = result.matched_count
            else:
                # Nothing to write, only report whether the record exists.
                matched = self.collection.count_documents({"id": book_id})
        except PyMongoError as e:
            logger.error("Failed to update book %s: %s", book_id, e)
            raise StorageError("Failed to update book") from e
        if matched == 0:
            raise BookNotFoundError(book_id)
        logger.info("Updated book %s fields %s", book_id, sorted(updates))

    def delete_book(self, book_id: str) -> None:
        """
        Remove the record with this id.

        Raises:
            BookNotFoundError: nothing was deleted.
            StorageError: the delete failed.
        """
        try:
            result = self.collection.delete_one({"id": book_id})
        except PyMongoError as e:
            logger.error("Failed to delete book %s: %s", book_id, e)
            raise StorageError("Failed to delete book") from e
        if result.deleted_count == 0:
            raise BookNotFoundError(book_id)
        logger.info("Deleted book %s", book_id)

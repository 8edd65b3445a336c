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

""" Example records inserted into an empty collection at startup """
import logging

from pymongo.collection import Collection

from bookstore.utils.log import log_exec_time
from bookstore.utils.models import Book

logger = logging.getLogger(__name__)

START_DATA = [
    Book(
        id="example1",
        title="The Vortex",
        author="José Eustasio Rivera",
        edition="958-30-0804-4",
        pages="292",
        year="1924",
    ),
    Book(
        id="example2",
        title="Frankenstein",
        author="Mary Shelley",
        edition="978-3-649-64609-9",
        pages="280",
        year="1818",
    ),
    Book(
        id="example3",
        title="The Black Cat",
        author="Edgar Allan Poe",
        edition="978-3-99168-238-7",
        pages="280",
        year="1843",
    ),
]


class SeedError(RuntimeError):
    """The collection holds more than one copy of a seed record."""


@log_exec_time(logger)
def prepare_data(collection: Collection, books=None) -> int:
    """
    Insert each example record unless an identical document is already
    stored. Safe to run on every startup.

    Args:
        collection (Collection): Target collection.
        books (list): Records to seed, defaults to START_DATA.

    Returns:
        int: Number of records inserted.

    Raises:
        SeedError: more than one stored document matches a seed record.
    """
    inserted = 0
    for book in START_DATA if books is None else books:
        document = book.to_document()
        matches = list(collection.find(document))
        if len(matches) > 1:
            raise SeedError(
                f"more records were found for seed record {book.id}")
        if matches:
            logger.debug("Seed record %s already present", book.id)
            continue
        result = collection.insert_one(dict(document))
        logger.info("Seeded %s as %s", book.id, result.inserted_id)
        inserted += 1
    return inserted

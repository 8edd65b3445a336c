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

""" HTTP client for the get-service, used by the split frontend """
import logging
from urllib.parse import quote

import requests

from bookstore.store import BookNotFoundError, BookStoreError

logger = logging.getLogger(__name__)


class UpstreamError(BookStoreError):
    """The get-service could not be reached or answered with an error."""


class BookServiceClient:
    """
    Reads books from the get-service. Offers the same read methods as
    BookRepository so the frontend routes work with either.
    """

    def __init__(self, base_url: str, timeout: float = 5,
                 session: requests.Session = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, not_found: Exception = None):
        """
        GET a JSON document from the get-service.

        A 404 raises ``not_found`` when given; every other failure,
        including a 404 without ``not_found``, is an UpstreamError.
        """
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            raise UpstreamError(f"Failed to reach {url}") from e
        if response.status_code == 404 and not_found is not None:
            raise not_found
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.error("Request to %s returned %s", url, response.status_code)
            raise UpstreamError(
                f"{url} returned {response.status_code}") from e
        try:
            return response.json()
        except ValueError as e:
            logger.error("Request to %s returned invalid JSON: %s", url, e)
            raise UpstreamError(f"{url} returned invalid JSON") from e

    def find_all_books(self):
        return self._get("/api/books")

    def find_all_authors(self):
        return self._get("/api/authors")

    def find_all_years(self):
        return self._get("/api/years")

    def find_book(self, book_id: str):
        return self._get(f"/api/books/{quote(book_id, safe='')}",
                         not_found=BookNotFoundError(book_id))

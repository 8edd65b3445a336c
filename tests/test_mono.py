# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

""" Unit test for the monolith app """
import unittest
from unittest.mock import patch

import mongomock
from pymongo.errors import PyMongoError

from bookstore.monolith.mono import create_app
from bookstore.seed import prepare_data
from bookstore.store import BookRepository


class TestMonolithApi(unittest.TestCase):
    """Test case for the REST routes of the monolith."""

    def setUp(self):
        self.collection = mongomock.MongoClient()["exercise-1"]["information"]
        prepare_data(self.collection)
        self.app = create_app(BookRepository(self.collection))
        self.client = self.app.test_client()

    def test_book_lifecycle(self):
        """Create, read, update, delete and read again."""
        response = self.client.post(
            "/api/books", json={"id": "b1", "title": "T", "author": "A"})
        self.assertEqual(response.status_code, 201)
        body = response.get_json()
        self.assertEqual(body["message"], "Book created successfully")
        self.assertTrue(body["insertedId"])

        response = self.client.get("/api/books/b1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["title"], "T")

        response = self.client.put("/api/books/b1", json={"title": "T2"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(),
                         {"message": "Book updated successfully"})

        book = self.client.get("/api/books/b1").get_json()
        self.assertEqual(book["title"], "T2")
        self.assertEqual(book["author"], "A")

        response = self.client.delete("/api/books/b1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(),
                         {"message": "Book deleted successfully"})

        response = self.client.get("/api/books/b1")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {"error": "Book not found"})

    def test_book_lifecycle_with_slash_in_id(self):
        """Ids containing a slash can be read, updated and deleted."""
        response = self.client.post(
            "/api/books", json={"id": "a/b", "title": "T", "author": "A"})
        self.assertEqual(response.status_code, 201)

        for path in ("/api/books/a/b", "/api/books/a%2Fb"):
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.get_json()["id"], "a/b")

        response = self.client.put("/api/books/a%2Fb", json={"title": "T2"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            self.client.get("/api/books/a/b").get_json()["title"], "T2")

        response = self.client.delete("/api/books/a%2Fb")
        self.assertEqual(response.status_code, 200)

        response = self.client.get("/api/books/a%2Fb")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {"error": "Book not found"})

    def test_list_routes(self):
        """Seeded records are listed with public names."""
        books = self.client.get("/api/books").get_json()
        self.assertEqual([b["id"] for b in books],
                         ["example1", "example2", "example3"])
        self.assertEqual(books[1], {
            "id": "example2",
            "title": "Frankenstein",
            "author": "Mary Shelley",
            "edition": "978-3-649-64609-9",
            "pages": "280",
            "year": "1818",
        })
        self.assertEqual(
            self.client.get("/api/authors").get_json()[2],
            {"author": "Edgar Allan Poe"})
        self.assertEqual(
            self.client.get("/api/years").get_json()[0], {"year": "1924"})

    def test_create_duplicate_id(self):
        """Same id with different fields is a conflict."""
        response = self.client.post(
            "/api/books",
            json={"id": "example1", "title": "Other", "author": "Someone"})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.get_json(), {"error": "Book already exists"})

    def test_create_missing_fields(self):
        """id, title and author are mandatory."""
        response = self.client.post(
            "/api/books", json={"id": "b1", "title": "T"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json(),
            {"error": "Missing mandatory fields: 'id', 'title', or 'author'"})

    def test_create_invalid_body(self):
        """Malformed JSON and non-objects are rejected."""
        for data in ("{not json", "[1, 2]"):
            with self.subTest(data=data):
                response = self.client.post(
                    "/api/books", data=data, content_type="application/json")
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json(),
                                 {"error": "Invalid request body"})

    def test_update_invalid_body(self):
        """PUT needs a JSON object."""
        response = self.client.put(
            "/api/books/example1", data="nope",
            content_type="application/json")

        self.assertEqual(response.status_code, 400)

    def test_update_ignores_unknown_fields(self):
        """Unrecognized keys leave the record unchanged."""
        before = self.client.get("/api/books/example1").get_json()

        for body in ({}, {"id": "changed", "isbn": "x"}):
            with self.subTest(body=body):
                response = self.client.put("/api/books/example1", json=body)
                self.assertEqual(response.status_code, 200)

        self.assertEqual(
            self.client.get("/api/books/example1").get_json(), before)

    def test_update_missing(self):
        """Updating an unknown id is a 404."""
        response = self.client.put("/api/books/missing", json={"title": "x"})

        self.assertEqual(response.status_code, 404)

    def test_delete_missing(self):
        """Deleting an unknown id is a 404."""
        response = self.client.delete("/api/books/missing")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {"error": "Book not found"})

    def test_storage_failure(self):
        """Driver errors become a generic 500."""
        with patch.object(self.collection, "find_one",
                          side_effect=PyMongoError("connection reset")):
            response = self.client.get("/api/books/example1")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(),
                         {"error": "Failed to retrieve book"})

    def test_write_storage_failures(self):
        """Each write route maps driver errors to its own 500 message."""
        new_book = {"id": "b1", "title": "T", "author": "A"}
        cases = [
            ("count_documents",
             lambda: self.client.post("/api/books", json=new_book),
             "Failed to check for existing book"),
            ("insert_one",
             lambda: self.client.post("/api/books", json=new_book),
             "Failed to insert book"),
            ("update_one",
             lambda: self.client.put("/api/books/example1",
                                     json={"title": "x"}),
             "Failed to update book"),
            ("delete_one",
             lambda: self.client.delete("/api/books/example1"),
             "Failed to delete book"),
        ]
        for method, send, message in cases:
            with self.subTest(method=method):
                with patch.object(self.collection, method,
                                  side_effect=PyMongoError("down")):
                    response = send()
                self.assertEqual(response.status_code, 500)
                self.assertEqual(response.get_json(), {"error": message})


class TestMonolithFrontend(unittest.TestCase):
    """Test case for the HTML routes of the monolith."""

    def setUp(self):
        self.collection = mongomock.MongoClient()["exercise-1"]["information"]
        prepare_data(self.collection)
        self.client = create_app(BookRepository(self.collection)).test_client()

    def test_pages(self):
        """Each page renders the data it is about."""
        cases = {
            "/": "Bookstore",
            "/books": "The Vortex",
            "/authors": "Mary Shelley",
            "/years": "1843",
            "/search": "Book id",
        }
        for path, expected in cases.items():
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 200)
                self.assertIn(expected, response.get_data(as_text=True))

    def test_search_by_id(self):
        """A search shows the record or a not found notice."""
        found = self.client.get("/search?id=example3").get_data(as_text=True)
        self.assertIn("The Black Cat", found)

        missing = self.client.get("/search?id=nope").get_data(as_text=True)
        self.assertIn('No book with id "nope"', missing)

    def test_create_page(self):
        """The create route has no content."""
        response = self.client.get("/create")

        self.assertEqual(response.status_code, 204)

    def test_stylesheet(self):
        """CSS is served under /css."""
        response = self.client.get("/css/style.css")

        self.assertEqual(response.status_code, 200)
        response.close()

    def test_storage_failure_page(self):
        """Storage errors render the error page."""
        with patch.object(self.collection, "find",
                          side_effect=PyMongoError("down")):
            response = self.client.get("/books")

        self.assertEqual(response.status_code, 500)
        self.assertIn("Something went wrong", response.get_data(as_text=True))


if __name__ == '__main__':
    unittest.main()

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

"""
Route registration shared by the monolith and the split services.

Each ``register_*`` function binds a group of routes to an app and closes
over the books source it was given, so no handler reaches for a global
connection. Errors raised by the data layer are turned into responses by
the handlers installed with ``register_error_handlers``.
"""
import logging

from flask import Flask, jsonify, render_template, request

from bookstore.store import (
    BookConflictError,
    BookNotFoundError,
    BookStoreError,
)
from bookstore.utils.models import Book, InvalidBookError

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"


def _is_api_request() -> bool:
    return request.path.startswith(API_PREFIX)


def _read_json_body():
    # Invalid or absent JSON yields None, which the callers reject.
    return request.get_json(force=True, silent=True)


def register_error_handlers(app: Flask):
    """Map data layer errors to HTTP responses."""

    @app.errorhandler(InvalidBookError)
    def invalid_book(error):
        return jsonify({"error": str(error)}), 400

    @app.errorhandler(BookNotFoundError)
    def book_not_found(error):
        if _is_api_request():
            return jsonify({"error": "Book not found"}), 404
        return render_template("error.html", message="Book not found"), 404

    @app.errorhandler(BookConflictError)
    def book_conflict(error):
        return jsonify({"error": "Book already exists"}), 409

    @app.errorhandler(BookStoreError)
    def storage_failure(error):
        logger.error("Request %s %s failed: %s",
                     request.method, request.path, error, exc_info=error)
        if _is_api_request():
            return jsonify({"error": str(error)}), 500
        return render_template(
            "error.html", message="Something went wrong"), 500


def register_book_read_routes(app: Flask, books):
    """GET routes for the book collection."""

    @app.route("/api/books", methods=["GET"])
    def get_books():
        return jsonify(books.find_all_books())

    @app.route("/api/books/<path:book_id>", methods=["GET"])
    def get_book(book_id):
        return jsonify(books.find_book(book_id))

    @app.route("/api/authors", methods=["GET"])
    def get_authors():
        return jsonify(books.find_all_authors())

    @app.route("/api/years", methods=["GET"])
    def get_years():
        return jsonify(books.find_all_years())


def register_book_create_route(app: Flask, books):
    """POST route creating a book."""

    @app.route("/api/books", methods=["POST"])
    def create_book():
        book = Book.from_dict(_read_json_body())
        inserted_id = books.insert_book(book)
        return jsonify({
            "message": "Book created successfully",
            "insertedId": inserted_id,
        }), 201


def register_book_update_route(app: Flask, books):
    """PUT route applying a partial update."""

    @app.route("/api/books/<path:book_id>", methods=["PUT"])
    def update_book(book_id):
        changes = _read_json_body()
        if not isinstance(changes, dict):
            raise InvalidBookError("Invalid request body")
        books.update_book(book_id, changes)
        return jsonify({"message": "Book updated successfully"})


def register_book_delete_route(app: Flask, books):
    """DELETE route removing a book."""

    @app.route("/api/books/<path:book_id>", methods=["DELETE"])
    def delete_book(book_id):
        books.delete_book(book_id)
        return jsonify({"message": "Book deleted successfully"})


def register_frontend_routes(app: Flask, books):
    """
    HTML pages. ``books`` is either a BookRepository or a
    BookServiceClient; both expose the same read methods.
    """

    @app.route("/")
    def home():
        return render_template("index.html")

    @app.route("/books")
    def book_table():
        return render_template("book-table.html", books=books.find_all_books())

    @app.route("/authors")
    def authors():
        return render_template(
            "authors.html", authors=books.find_all_authors())

    @app.route("/years")
    def years():
        return render_template("years.html", years=books.find_all_years())

    @app.route("/search")
    def search():
        book_id = request.args.get("id", "").strip()
        book = None
        if book_id:
            try:
                book = books.find_book(book_id)
            except BookNotFoundError:
                logger.info("Search for unknown book %s", book_id)
        return render_template(
            "search-bar.html", query=book_id, book=book)

    @app.route("/create")
    def create():
        return "", 204

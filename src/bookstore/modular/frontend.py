# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


# frontend.py
import logging

from bookstore.client import BookServiceClient
from bookstore.renderer import create_frontend_app
from bookstore.routes import register_error_handlers, register_frontend_routes
from bookstore.utils.config import Config
from bookstore.utils.log import configure_logging

logger = logging.getLogger(__name__)


def create_app(books=None, config=None):
    """
    HTML frontend. Without an explicit books source it reads from the
    get-service at GET_SERVICE_URL.
    """
    config = config or Config()
    if books is None:
        books = BookServiceClient(
            config.GET_SERVICE_URL, timeout=config.REQUEST_TIMEOUT_SECONDS)
    app = create_frontend_app(__name__)
    register_error_handlers(app)
    register_frontend_routes(app, books)
    return app


def main():
    config = Config.from_env()
    configure_logging(config.LOG_LEVEL)
    logger.info("Reading books from %s", config.GET_SERVICE_URL)
    app = create_app(config=config)
    app.run(host=config.HOST, port=config.FRONTEND_PORT)


if __name__ == '__main__':
    main()

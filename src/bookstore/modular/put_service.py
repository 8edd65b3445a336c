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


# put_service.py
from flask import Flask

from bookstore.database import open_repository_or_exit
from bookstore.routes import register_book_update_route, register_error_handlers
from bookstore.utils.config import Config
from bookstore.utils.log import configure_logging


def create_app(books):
    app = Flask(__name__)
    register_error_handlers(app)
    register_book_update_route(app, books)
    return app


def main():
    config = Config.from_env()
    configure_logging(config.LOG_LEVEL)
    app = create_app(open_repository_or_exit(config))
    app.run(host=config.HOST, port=config.PUT_SERVICE_PORT)


if __name__ == '__main__':
    main()

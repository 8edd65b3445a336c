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

""" Config settings for the bookstore services """
import os

ENV_PREFIX = "BOOKSTORE_"


class Config:
    """
    Configuration settings for the database, the services and logging.
    Values can be overridden from the environment with from_env.
    """

    # === Database ===
    DATABASE_URI_ENV = "DATABASE_URI"
    DATABASE_NAME = "exercise-1"
    COLLECTION_NAME = "information"
    CONNECT_TIMEOUT_SECONDS = 10

    # === HTTP ===
    HOST = "0.0.0.0"
    MONOLITH_PORT = 8080
    FRONTEND_PORT = 8080
    GET_SERVICE_PORT = 8081
    DELETE_SERVICE_PORT = 8082
    POST_SERVICE_PORT = 8083
    PUT_SERVICE_PORT = 8084
    GET_SERVICE_URL = "http://localhost:8081"
    REQUEST_TIMEOUT_SECONDS = 5

    # === Logging ===
    LOG_LEVEL = "INFO"

    def log_all_constants(self) -> str:
        """
        Returns all constants as a formatted string.

        Returns:
            str: A string containing all constants with their names and values.
        """
        constants_list = []
        constants_list.append("===== Configs =====\n")
        for name in dir(self):
            if name.isupper():  # Filter only constants (uppercase variables)
                value = getattr(self, name)
                constants_list.append(f"{name}: {value}")
        return "\n".join(constants_list)

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        """
        Build a Config whose constants are overridden by ``BOOKSTORE_<NAME>``
        environment variables. Values are cast to the type of the default.

        Args:
            environ (dict): Mapping to read from, defaults to ``os.environ``.

        Returns:
            Config: A new instance with the overrides applied.
        """
        environ = os.environ if environ is None else environ
        config = cls()
        for name in dir(cls):
            if not name.isupper():
                continue
            raw = environ.get(ENV_PREFIX + name)
            if raw is None:
                continue
            default = getattr(cls, name)
            try:
                value = type(default)(raw)
            except ValueError as e:
                raise ValueError(
                    f"Invalid value for {ENV_PREFIX}{name}: {raw!r}") from e
            setattr(config, name, value)
        return config

    def get_database_uri(self, environ=None) -> str:
        """
        Returns the MongoDB connection string, or an empty string when the
        variable named by DATABASE_URI_ENV is unset.
        """
        environ = os.environ if environ is None else environ
        return environ.get(self.DATABASE_URI_ENV, "")

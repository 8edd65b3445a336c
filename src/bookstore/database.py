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

""" MongoDB connection and collection bootstrap """
import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from bookstore.seed import SeedError, prepare_data
from bookstore.store import BookRepository
from bookstore.utils.config import Config
from bookstore.utils.log import log_exec_time

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Required configuration is missing."""


def connect_db(config: Config, environ=None) -> MongoClient:
    """
    Connect to MongoDB using the URI found in the environment and ping the
    server so that an unreachable database fails at startup.

    Args:
        config (Config): Run configuration.
        environ (dict): Environment mapping, defaults to ``os.environ``.

    Returns:
        MongoClient: A connected client.

    Raises:
        ConfigurationError: the connection string variable is unset.
        pymongo.errors.PyMongoError: the server cannot be reached.
    """
    uri = config.get_database_uri(environ)
    if not uri:
        raise ConfigurationError(
            f"{config.DATABASE_URI_ENV} environment variable not set")

    client = MongoClient(
        uri,
        server_api=ServerApi("1"),
        serverSelectionTimeoutMS=int(config.CONNECT_TIMEOUT_SECONDS * 1000),
    )
    client.admin.command("ping")
    logger.info("Connected to MongoDB")
    return client


@log_exec_time(logger)
def prepare_database(
    client: MongoClient, db_name: str, collection_name: str
) -> Collection:
    """
    Return the named collection, creating it first if it does not exist.
    """
    db = client[db_name]
    if collection_name not in db.list_collection_names():
        logger.info("Creating collection %s.%s", db_name, collection_name)
        db.create_collection(collection_name)
    return db[collection_name]


def open_repository(config: Config, environ=None) -> BookRepository:
    """
    Connect, prepare the collection, seed it and wrap it in a repository.
    Used by every service that talks to the database.
    """
    client = connect_db(config, environ)
    collection = prepare_database(
        client, config.DATABASE_NAME, config.COLLECTION_NAME)
    prepare_data(collection)
    return BookRepository(collection)


def open_repository_or_exit(config: Config, environ=None) -> BookRepository:
    """
    open_repository for service entry points: any startup failure is logged
    and terminates the process.
    """
    try:
        return open_repository(config, environ)
    except (ConfigurationError, SeedError, PyMongoError) as e:
        logger.error("Startup failed: %s", e)
        raise SystemExit(1) from e

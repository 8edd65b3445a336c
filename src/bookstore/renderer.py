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

""" HTML page rendering for the frontend routes """
import logging
from pathlib import Path

from flask import Flask

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static" / "css"


def create_frontend_app(import_name: str) -> Flask:
    """
    Flask app wired to the bundled templates, with the stylesheets served
    under ``/css``. Templates are compiled once here.
    """
    app = Flask(
        import_name,
        template_folder=str(TEMPLATE_DIR),
        static_folder=str(STATIC_DIR),
        static_url_path="/css",
    )
    preload_templates(app)
    return app


def preload_templates(app: Flask) -> list:
    """
    Compile every template into the app's Jinja cache so that requests
    never parse a template file.

    Returns:
        list: The names of the loaded templates.
    """
    names = app.jinja_env.list_templates(extensions=["html"])
    for name in names:
        app.jinja_env.get_template(name)
    logger.info("Loaded %d templates from %s", len(names), TEMPLATE_DIR)
    return names

"""Built-in skeleton templates for generated tools.

Templates are Jinja2 sources with plain ``{{ variable }}`` substitutions only.
Available variables:

    tool_name            the slug, e.g. ``file-hasher``
    tool_type            ``CLI``, ``TUI`` or ``Web``
    description          one-line description (autoescaped in .html templates)
    description_literal  the description as a Python string literal
    class_name           PascalCase form of the name, e.g. ``FileHasher``

Generated tools reuse the toolbox's own config loader and logging setup.
"""

# =============================================================================
# CLI tool
# =============================================================================

CLI_MAIN_TEMPLATE = '''\
# {{ tool_name }}: {{ description }}
"""Command-line entry point for {{ tool_name }}."""

from __future__ import annotations

import click

from toolbox.config import load_config
from toolbox.logger import configure_logging

APP_NAME = "{{ tool_name }}"
DESCRIPTION = {{ description_literal }}
VERSION = "1.0.0"


@click.command(name=APP_NAME, help=DESCRIPTION)
@click.version_option(VERSION, prog_name=APP_NAME)
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
def main(verbose: bool) -> None:
    config = load_config(app_name=APP_NAME)
    logger = configure_logging(
        level="debug" if verbose else config.log_level,
        output=config.log_file,
        fmt=config.log_format,
        name=APP_NAME,
    )

    logger.info("Starting %s", APP_NAME)

    # TODO: Implement your CLI tool logic here
    click.echo(DESCRIPTION)
    click.echo("This is a generated CLI tool template.")
    click.echo("Implement your functionality in main().")

    logger.info("%s completed successfully", APP_NAME)


if __name__ == "__main__":
    main()
'''

# =============================================================================
# TUI tool
# =============================================================================

TUI_MAIN_TEMPLATE = '''\
# {{ tool_name }}: {{ description }}
"""Terminal UI entry point for {{ tool_name }}."""

from __future__ import annotations

import sys

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, OptionList, Static

from toolbox.config import load_config
from toolbox.logger import configure_logging

APP_NAME = "{{ tool_name }}"
DESCRIPTION = {{ description_literal }}


class {{ class_name }}App(App):
    """Main application for {{ tool_name }}."""

    TITLE = APP_NAME
    BINDINGS = [Binding("q", "quit", "Quit")]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(DESCRIPTION, id="description")
        yield OptionList("Option 1", "Option 2", "Option 3", id="menu")
        yield Footer()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        # TODO: Handle menu selection here
        self.notify(f"Selected {event.option.prompt}")


def main() -> int:
    config = load_config(app_name=APP_NAME)
    logger = configure_logging(
        level=config.log_level,
        output=config.log_file or "stderr",
        fmt=config.log_format,
        name=APP_NAME,
    )

    logger.info("Starting %s TUI", APP_NAME)
    try:
        {{ class_name }}App().run(mouse=config.tui.mouse_events)
    except Exception:
        logger.exception("TUI application failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
'''

# =============================================================================
# Web tool
# =============================================================================

WEB_MAIN_TEMPLATE = '''\
# {{ tool_name }}: {{ description }}
"""HTTP service entry point for {{ tool_name }}."""

from __future__ import annotations

import json
import os
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any

from toolbox.config import load_config
from toolbox.logger import configure_logging

APP_NAME = "{{ tool_name }}"
DESCRIPTION = {{ description_literal }}
BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"
DEFAULT_PORT = 8080


class {{ class_name }}Handler(SimpleHTTPRequestHandler):
    """Serves the index page, a status endpoint and static files."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, directory=str(STATIC_DIR), **kwargs)

    def do_GET(self) -> None:
        if self.path in ("/", "/index.html"):
            body = (TEMPLATES_DIR / "index.html").read_bytes()
            self._send(HTTPStatus.OK, "text/html; charset=utf-8", body)
        elif self.path == "/api/status":
            payload = {"status": "ok", "service": APP_NAME, "description": DESCRIPTION}
            self._send(HTTPStatus.OK, "application/json", json.dumps(payload).encode("utf-8"))
        elif self.path.startswith("/static/"):
            self.path = self.path[len("/static"):]
            super().do_GET()
        else:
            self.send_error(HTTPStatus.NOT_FOUND)

    def _send(self, status: HTTPStatus, content_type: str, body: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def main() -> None:
    config = load_config(app_name=APP_NAME)
    logger = configure_logging(
        level=config.log_level,
        output=config.log_file,
        fmt=config.log_format,
        name=APP_NAME,
    )

    port = int(os.environ.get("PORT", DEFAULT_PORT))
    server = ThreadingHTTPServer(("", port), {{ class_name }}Handler)

    logger.info("Starting %s web server on port %d", APP_NAME, port)
    print(DESCRIPTION)
    print(f"Server starting on http://localhost:{port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down %s", APP_NAME)
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
'''

WEB_INDEX_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{{ tool_name }}</title>
    <link rel="stylesheet" href="/static/style.css">
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>{{ tool_name }}</h1>
            <p>{{ description }}</p>
        </div>
        <div class="content">
            <h2>Welcome to {{ tool_name }}</h2>
            <p>This is a generated web application template created with the Toolbox generator.</p>

            <div class="api-list">
                <h3>API Endpoints:</h3>
                <ul>
                    <li><a href="/api/status">GET /api/status</a> - Service status check</li>
                    <li><a href="/static/style.css">GET /static/</a> - Static file serving</li>
                </ul>
            </div>

            <div class="quick-start">
                <h3>Quick Start Guide:</h3>
                <ol>
                    <li>Modify templates in <code>templates/</code></li>
                    <li>Add CSS, JS, and images to <code>static/</code></li>
                    <li>Implement your handlers in <code>main.py</code></li>
                    <li>Update configuration in <code>configs/config.yaml</code></li>
                </ol>
            </div>
        </div>
        <div class="footer">
            Generated by the Toolbox generator
        </div>
    </div>
</body>
</html>
"""

WEB_STYLE_TEMPLATE = """\
/* Default styles for {{ tool_name }} */
body {
    font-family: Arial, sans-serif;
    margin: 40px;
    background-color: #f5f5f5;
}

.container {
    max-width: 800px;
    margin: 0 auto;
    background: white;
    padding: 30px;
    border-radius: 8px;
    box-shadow: 0 2px 10px rgba(0, 0, 0, 0.1);
}

.header {
    background: #7D56F4;
    color: white;
    padding: 20px;
    border-radius: 8px;
    margin-bottom: 30px;
}

.content {
    line-height: 1.6;
}

.footer {
    margin-top: 40px;
    color: #666;
    font-size: 12px;
    text-align: center;
    border-top: 1px solid #eee;
    padding-top: 20px;
}

code {
    background: #f0f0f0;
    padding: 2px 6px;
    border-radius: 3px;
    font-family: 'Courier New', monospace;
}

.api-list {
    background: #f8f9fa;
    padding: 15px;
    border-radius: 5px;
    border-left: 4px solid #7D56F4;
}

.quick-start {
    background: #e8f5e8;
    padding: 15px;
    border-radius: 5px;
    border-left: 4px solid #28a745;
}
"""

# Template name -> source. Names double as the artifact's path under the
# tool directory once the leading "<type>/" segment is dropped.
TEMPLATES: dict[str, str] = {
    "cli/main.py": CLI_MAIN_TEMPLATE,
    "tui/main.py": TUI_MAIN_TEMPLATE,
    "web/main.py": WEB_MAIN_TEMPLATE,
    "web/templates/index.html": WEB_INDEX_TEMPLATE,
    "web/static/style.css": WEB_STYLE_TEMPLATE,
}

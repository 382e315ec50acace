# SPDX-License-Identifier: MIT
"""Flask rendition of the generator form.

The page has two text areas, a Generate button, the generated tests with a
copy button and a theme toggle. Copying happens in the browser; the theme is
kept in the server-side preference store.
"""

from __future__ import annotations

import logfire
from flask import Flask, redirect, render_template_string, request, url_for

from constants import COPY_FAILURE_MESSAGE, COPY_SUCCESS_MESSAGE
from core.session import GeneratorSession
from runtime.environment import RuntimeEnv

PAGE_TEMPLATE = """<!doctype html>
<html lang="en" class="{{ session.theme }}">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Unit Test Model Pattern Generator</title>
  <style>
    body { font-family: system-ui, sans-serif; margin: 0; background: #f3f4f6; color: #111827; }
    html.dark body { background: #111827; color: #f3f4f6; }
    header, footer { padding: 1rem 1.5rem; display: flex; justify-content: space-between; align-items: center; }
    html.dark header, html.dark footer { background: #1f2937; }
    main { padding: 1.5rem; }
    label { display: block; font-size: 1.1rem; font-weight: 500; margin-bottom: .5rem; }
    textarea { width: 100%; padding: .75rem; box-sizing: border-box; border-radius: .375rem; border: 1px solid #d1d5db; }
    html.dark textarea, html.dark pre { background: #1f2937; color: #fff; border-color: #374151; }
    #jsonInput { height: 8rem; }
    #modelClassInput { height: 12rem; }
    pre { background: #f3f4f6; padding: 1rem; border-radius: .375rem; overflow: auto; white-space: pre-wrap; }
    .primary { background: #2563eb; color: #fff; padding: .5rem 1rem; border: 0; border-radius: .375rem; }
    .copy { background: #16a34a; color: #fff; padding: .5rem 1rem; border: 0; border-radius: .375rem; margin-top: 1rem; }
    #copyStatus { color: #22c55e; }
  </style>
</head>
<body>
  <header>
    <h1>Unit Test Model Pattern Generator</h1>
    <form method="post" action="{{ url_for('toggle_theme') }}">
      <button type="submit" aria-label="Toggle dark mode">{{ '🌞' if session.dark_mode else '🌜' }}</button>
    </form>
  </header>
  <main>
    <form method="post" action="{{ url_for('index') }}">
      <div>
        <label for="jsonInput">JSON Input</label>
        <textarea id="jsonInput" name="json_input" placeholder="Enter JSON response here">{{ session.json_input }}</textarea>
      </div>
      <div>
        <label for="modelClassInput">Model Class Code</label>
        <textarea id="modelClassInput" name="model_source" placeholder="Enter Dart model class code here">{{ session.model_source }}</textarea>
      </div>
      <button class="primary" type="submit">Generate Unit Tests</button>
    </form>
    {% if session.unit_tests %}
    <section>
      <h3>Generated Unit Tests</h3>
      <pre id="unitTests">{{ session.unit_tests }}</pre>
      <button class="copy" type="button" id="copyButton">Copy to Clipboard</button>
      <p id="copyStatus"></p>
    </section>
    {% endif %}
  </main>
  <footer><p>Generated code is not stored.</p></footer>
  <script>
    const copyButton = document.getElementById('copyButton');
    if (copyButton) {
      copyButton.addEventListener('click', async () => {
        const status = document.getElementById('copyStatus');
        try {
          await navigator.clipboard.writeText(document.getElementById('unitTests').textContent);
          status.textContent = {{ copy_success|tojson }};
        } catch (e) {
          status.textContent = {{ copy_failure|tojson }};
        }
      });
    }
    {% if session.alert %}
    alert({{ session.alert|tojson }});
    {% endif %}
  </script>
</body>
</html>
"""


def _prefers_dark() -> bool:
    """Return ``True`` when the client hints at a dark color scheme."""
    hint = request.headers.get("Sec-CH-Prefers-Color-Scheme", "")
    return hint.strip().strip('"').lower() == "dark"


def _render(session: GeneratorSession) -> str:
    return render_template_string(
        PAGE_TEMPLATE,
        session=session,
        copy_success=COPY_SUCCESS_MESSAGE,
        copy_failure=COPY_FAILURE_MESSAGE,
    )


def create_app(env: RuntimeEnv | None = None) -> Flask:
    """Return the Flask application serving the generator form.

    Args:
        env: Runtime environment supplying settings and the preference store.
            Defaults to the initialised :class:`RuntimeEnv` singleton.
    """
    app = Flask(__name__)

    def _runtime() -> RuntimeEnv:
        return env or RuntimeEnv.instance()

    def _session() -> GeneratorSession:
        session = _runtime().new_session()
        session.load_theme(system_prefers_dark=_prefers_dark())
        return session

    @app.after_request
    def _request_color_scheme_hint(response):
        response.headers["Accept-CH"] = "Sec-CH-Prefers-Color-Scheme"
        return response

    @app.route("/", methods=["GET", "POST"])
    def index():
        session = _session()
        if request.method == "POST":
            session.json_input = request.form.get("json_input", "")
            session.model_source = request.form.get("model_source", "")
            with logfire.span("web.generate"):
                session.generate()
        return _render(session)

    @app.route("/theme", methods=["POST"])
    def toggle_theme():
        session = _session()
        theme = session.toggle_theme()
        logfire.info("Theme preference updated", theme=theme)
        return redirect(url_for("index"))

    return app


__all__ = ["PAGE_TEMPLATE", "create_app"]

"""Vanity and index page templates.

Both templates are compiled once by ``Pages`` when the app is created and
rendered from immutable context afterwards.
"""

from dataclasses import dataclass
from typing import Any

from kida import Environment

from vanityurls.errors import RenderError

INDEX_SOURCE = """<!DOCTYPE html>
<html>
<h1>{{ host }}</h1>
<ul>
{% for handler in handlers %}<li><a href="{{ docs_url }}/{{ handler }}">{{ handler }}</a></li>{% end %}
</ul>
</html>
"""

VANITY_SOURCE = """<!DOCTYPE html>
<html>
<head>
<meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>
<meta name="go-import" content="{{ import_path }} {{ vcs }} {{ repo }}">
<meta name="go-source" content="{{ import_path }} {{ display }}">
<meta http-equiv="refresh" content="0; url={{ docs_url }}/{{ import_path }}/{{ subpath }}">
</head>
<body>
Nothing to see here; <a href="{{ docs_url }}/{{ import_path }}/{{ subpath }}">see the package on the documentation site</a>.
</body>
</html>"""


def create_environment() -> Environment:
    """Create the kida Environment used for both pages."""
    return Environment(autoescape=True)


@dataclass(frozen=True, slots=True)
class VanityPage:
    """Context for one vanity page."""

    import_path: str
    subpath: str
    repo: str
    display: str
    vcs: str


class Pages:
    """Compiled page templates.

    Usage::

        pages = Pages(docs_url="https://pkg.go.dev")
        html = pages.render_index("example.org", ["example.org/pkg"])
    """

    __slots__ = ("_index", "_vanity", "docs_url")

    def __init__(self, docs_url: str, env: Environment | None = None) -> None:
        env = env or create_environment()
        self.docs_url = docs_url
        self._index = env.from_string(INDEX_SOURCE)
        self._vanity = env.from_string(VANITY_SOURCE)

    def render_vanity(self, page: VanityPage) -> str:
        """Render the ``go-import``/``go-source`` page for a matched path."""
        return self._render(
            self._vanity,
            "vanity",
            {
                "import_path": page.import_path,
                "subpath": page.subpath,
                "repo": page.repo,
                "display": page.display,
                "vcs": page.vcs,
                "docs_url": self.docs_url,
            },
        )

    def render_index(self, host: str, handlers: list[str]) -> str:
        """Render the list of every configured import path."""
        return self._render(
            self._index,
            "index",
            {"host": host, "handlers": handlers, "docs_url": self.docs_url},
        )

    @staticmethod
    def _render(template: Any, name: str, context: dict[str, Any]) -> str:
        try:
            return template.render(context)
        except Exception as exc:
            msg = f"cannot render the {name} page: {exc}"
            raise RenderError(msg) from exc

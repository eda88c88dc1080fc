"""
crud-api Backend — HTML Views
==============================

What:  The two pages served by the site routes: the home page and the
       reset confirmation page.
Why:   Both are static apart from the route list, so they are rendered
       from string templates rather than a template engine.
"""

from string import Template
from typing import Iterable, Tuple

from crud_api import __version__

ROUTE_TABLE: Tuple[Tuple[str, str, str], ...] = (
    ("GET", "/books", "List all books"),
    ("POST", "/books", "Create a book"),
    ("GET", "/books/:id", "Get one book"),
    ("PUT", "/books/:id", "Replace a book's title, author, image and releaseDate"),
    ("DELETE", "/books/:id", "Delete a book"),
    ("GET", "/wines", "List all wines"),
    ("POST", "/wines", "Create a wine"),
    ("GET", "/wines/:id", "Get one wine"),
    ("PUT", "/wines/:id", "Replace a wine's name, year, country, description, image and price"),
    ("DELETE", "/wines/:id", "Delete a wine"),
    ("POST", "/reset", "Reload both collections from seed data"),
)

_LAYOUT = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>$title</title>
</head>
<body>
  <header><h1><a href="/">crud-api</a></h1></header>
  <main>
$body
  </main>
  <footer><small>crud-api v$version</small></footer>
</body>
</html>
""")

_HOME_BODY = Template("""    <p>A RESTful API over two collections: books and wines.</p>
    <table>
      <thead><tr><th>Method</th><th>Path</th><th>Description</th></tr></thead>
      <tbody>
$rows
      </tbody>
    </table>
    <p><a href="/reset">Reset the data</a> &middot; <a href="/docs">API docs</a></p>""")

_RESET_BODY = """    <h2>Reset data</h2>
    <p>This removes every book and wine and reloads the seed data.</p>
    <form method="post" action="/reset">
      <button type="submit">Reset</button>
    </form>
    <p><a href="/">Cancel</a></p>"""


def _page(title: str, body: str) -> str:
    return _LAYOUT.substitute(title=title, body=body, version=__version__)


def _route_rows(routes: Iterable[Tuple[str, str, str]]) -> str:
    return "\n".join(
        f"        <tr><td>{method}</td><td><code>{path}</code></td><td>{text}</td></tr>"
        for method, path, text in routes
    )


def render_home() -> str:
    """Home page listing every API route."""
    return _page("crud-api", _HOME_BODY.substitute(rows=_route_rows(ROUTE_TABLE)))


def render_reset_confirmation() -> str:
    """Confirmation page whose form POSTs to /reset."""
    return _page("crud-api · reset", _RESET_BODY)

import sys
from pathlib import Path

sys.path.insert(0, str(Path("..", "..", "src").resolve()))

project = "h3geometry"
copyright = "2026, h3geometry developers"
author = "h3geometry developers"
release = "v0.1.0"
version = "v0.1.0"

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.doctest",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "shapely": ("https://shapely.readthedocs.io/en/stable/", None),
    "pyproj": ("https://pyproj4.github.io/pyproj/stable/", None),
}
intersphinx_disabled_domains = ["std"]

templates_path = ["_templates"]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

always_document_param_types = True
html_theme = "sphinx_rtd_theme"

html_static_path = ["_static"]
epub_show_urls = "footnote"

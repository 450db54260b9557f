import importlib.metadata

# Project --------------------------------------------------------------

project = "mockql"
version = release = importlib.metadata.version("mockql").partition(".dev")[0]

# General --------------------------------------------------------------

default_role = "code"
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "myst_parser",
]
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": None,
}
autodoc_typehints = "description"
autodoc_preserve_defaults = True
intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "graphql": ("https://graphql-core-3.readthedocs.io/en/latest/", None),
}
myst_enable_extensions = [
    "fieldlist",
]
myst_heading_anchors = 2

# HTML -----------------------------------------------------------------

html_theme = "furo"
html_copy_source = False
pygments_style = "default"
pygments_style_dark = "github-dark"
html_show_copyright = False
html_use_index = False
html_domain_indices = False

# mypy: ignore_errors

# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# Project information

project = 'clausal'
release = '0.1'

# General configuration

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

autodoc_class_signature = 'separated'

autodoc_default_options = {
    'member-order': 'bysource',
    'show-inheritance': True,
}

intersphinx_mapping = {
    'sympy': ('https://docs.sympy.org/latest', None),
    'pyeda': ('https://pyeda.readthedocs.io/en/latest', None),
    'python': ('https://docs.python.org/3', None),
}

language = 'en'

python_use_unqualified_type_names = True

# Options for HTML output

html_last_updated_fmt = ''

html_theme = 'sphinx_book_theme'

html_theme_options = {
    'home_page_in_toc': True,
    'show_toc_level': 1,
}

html_title = 'clausal'

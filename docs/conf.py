# Configuration file for the Sphinx documentation builder.

import os
import sys

sys.path.insert(0, os.path.abspath('..'))

# -- Project information -----------------------------------------------------

project = 'analog-input'
copyright = '2026, analog-input contributors'
author = 'analog-input contributors'
release = '0.0.1'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',          # Core autodoc functionality
    'sphinx.ext.napoleon',         # For NumPy style docstrings
    'sphinx.ext.viewcode',         # Add links to source code
    'sphinx.ext.autosummary',      # Generate summary tables automatically
    'sphinx_copybutton',           # Adds "copy" buttons to code blocks
]

autosummary_generate = True
napoleon_numpy_docstring = True

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# -- Options for HTML output -------------------------------------------------

html_theme = 'furo'
html_theme_options = {
    "navigation_with_keys": True,
}

# Make copy button ignore Python REPL prompts (>>> and ...)
copybutton_prompt_text = r'>>> |\.\.\. '
copybutton_prompt_is_regexp = True

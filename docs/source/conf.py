# Sphinx configuration for the traffic simulation docs.
#
# Build from the repository root with:
#   sphinx-build -b html docs/source docs/build

import os
import sys
import sphinx_rtd_dark_mode

# Project root holds sim/, server/ and the top-level modules.
sys.path.insert(0, os.path.abspath("../.."))

project = 'Traffic Sim'
copyright = '2026, Traffic Sim Team'
author = 'Traffic Sim Team'
release = '0.1'

extensions = [
    "sphinx.ext.autodoc",    # pull API pages from docstrings
    "sphinx.ext.napoleon",   # sim/ uses NumPy-style sections
    "sphinx.ext.viewcode",
    "sphinx_rtd_dark_mode",
]

master_doc = "index"
exclude_patterns = []
autodoc_member_order = "bysource"

html_theme = "sphinx_rtd_theme"
default_dark_mode = True

# The HTTP stack is optional for a docs build.
autodoc_mock_imports = ["fastapi", "uvicorn", "pydantic", "starlette"]

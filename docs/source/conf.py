#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Configuration file for the Sphinx documentation builder.

For the full list of built-in configuration values, see the
documentation: https://www.sphinx-
doc.org/en/master/usage/configuration.html
"""

import os
import sys

# autodoc imports eclib from the source tree
sys.path.insert(0, os.path.abspath(os.path.join("..", "..")))

import eclib  # noqa: E402 # pylint: disable=wrong-import-position

# -- Project information -----------------------------------------------------

project = eclib.name
project_copyright = "2017-2022 The eclib developers"
author = eclib.__author__
release = eclib.__version__

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

autodoc_member_order = "bysource"

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]

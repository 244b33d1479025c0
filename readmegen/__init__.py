"""
readmegen - Markdown README generation from project metadata.

A small form-driven tool that collects a project's title, description,
features, setup steps, badges and links, and renders them into a
structured README.md ready to preview, copy or download.
"""

__version__ = "0.1.0"
__author__ = "Divya Jyoti"

"""AI-Index: section maps for large source files.

Locates named line ranges inside a file so that an agent can read only
the part it needs instead of the whole file.
"""

__version__ = "2.0.0"

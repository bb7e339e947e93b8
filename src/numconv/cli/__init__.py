"""CLI package.

The ``cli`` sub-package contains the Click application and the mapping
from error kinds to display messages. It should import only from the
public API of the parent package and its top-level subpackages.
"""
from __future__ import annotations

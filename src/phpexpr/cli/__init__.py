"""CLI package.

The ``cli`` sub-package holds the Click application behind the
``phpexpr`` console script.  Commands import the parser and serializer
lazily so that ``phpexpr --help`` stays fast.
"""
from __future__ import annotations

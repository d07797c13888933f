# -*- coding: utf-8 -*-
"""
Exceptions for the linking engine.

Only lifecycle misuse raises. Data problems (bad records, dangling aliases,
malformed amounts, failing price lookups) degrade to "no match" and never
surface from annotate().
"""


class LinkingError(Exception):
    """Base class for linking engine errors."""


class VocabularyStateError(LinkingError):
    """Builder or loader used out of order (add after finalize, advance while idle, ...)."""

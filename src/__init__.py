# -*- coding: utf-8 -*-
"""
Chat item linker source package.

Recognizes item names, item aliases and money shorthand in chat lines and
wraps them in tier markup. See src.linking for the engine and src.utils for
shared data structures and I/O.
"""

# -*- coding: utf-8 -*-
"""
Shared utilities for the chat item linker.

Data structures that cross module boundaries, logging setup and JSON/JSONL
helpers for item snapshots and chat logs.
"""

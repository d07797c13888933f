# -*- coding: utf-8 -*-
"""
Chat item linking engine.

Pipeline per chat line:
    VocabularyIndex (names + aliases, built by VocabularyLoader)
        -> Scanner (longest match at word boundaries, money first)
        -> AnnotationEmitter (filter, display text, Classifier tier, events)
        -> LinkEngine (message eligibility, event sink, config updates)
"""

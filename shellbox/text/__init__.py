# -*- coding: utf-8 -*-
"""
The 'text' package contains small text helpers such as the NATO phonetic
speller.
"""

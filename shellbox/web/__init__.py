# -*- coding: utf-8 -*-
"""
The 'web' package contains helpers for taking URLs apart and reporting
their components.
"""

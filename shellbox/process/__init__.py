# -*- coding: utf-8 -*-
"""
The 'process' package contains process-control utilities built on psutil.
"""

# -*- coding: utf-8 -*-
"""
The 'timing' package contains the minute countdown timer and the month
calendar printer.
"""

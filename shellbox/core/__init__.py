# -*- coding: utf-8 -*-
"""
The 'core' package holds the cross-cutting pieces shared by the utilities:
error types, configuration loading, logging setup, the injectable sleeper
and the notification channels.
"""

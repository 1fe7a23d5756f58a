# -*- test-case-name: rejoinder.test -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Tests for L{rejoinder}.
"""

from hypothesis import HealthCheck, settings


settings.register_profile(
    "patience",
    settings(
        deadline=None,
        suppress_health_check=[
            HealthCheck.too_slow,
            HealthCheck.differing_executors,
        ],
    ),
)
settings.load_profile("patience")

"""Adapter exposing a bicycle through the capability set."""

from typing import Optional

from capability_dispatch.infrastructure.adapters.base_adapter import BaseCapabilityAdapter
from capability_dispatch.variants.bicycle.bicycle import Bicycle


class BicycleAdapter(BaseCapabilityAdapter):
    """
    Bicycle adapter.

    ``primary_action`` pedals and ``report_rate`` reports the speed. Built
    without an argument it owns a fresh ``Bicycle``; given one, it wraps that
    instance (or anything else with ``pedal`` and ``speed``).
    """

    primary_native = "pedal"
    rate_native = "speed"

    def __init__(self, bicycle: Optional[Bicycle] = None):
        super().__init__(bicycle if bicycle is not None else Bicycle())

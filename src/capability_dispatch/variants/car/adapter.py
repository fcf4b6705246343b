"""Adapter exposing a car through the capability set."""

from capability_dispatch.infrastructure.adapters.base_adapter import BaseCapabilityAdapter
from capability_dispatch.variants.car.car import Car


class CarAdapter(BaseCapabilityAdapter):
    """
    Car adapter.

    ``primary_action`` starts the engine and ``report_rate`` reports the
    speed. A car needs credentials, so the adapter always wraps an instance
    built by the caller.
    """

    primary_native = "start_engine"
    rate_native = "speed"

    def __init__(self, car: Car):
        super().__init__(car)

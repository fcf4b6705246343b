"""Car actor: a connected car started remotely with an API key."""


class EngineStartError(Exception):
    """Raised when the engine cannot be started."""
    pass


class Car:
    """A car. Moves by starting its engine and reports its speed."""

    def __init__(self, api_key: str, top_speed: int = 100, fuel_litres: float = 40.0):
        if not api_key:
            raise ValueError("Car requires an API key")
        self._api_key = api_key
        self.top_speed = top_speed
        self.fuel_litres = fuel_litres
        self.engine_running = False
        self.ignitions = 0

    def start_engine(self) -> None:
        if self.fuel_litres <= 0:
            raise EngineStartError("Cannot start engine: fuel tank is empty")
        self.engine_running = True
        self.ignitions += 1

    def speed(self) -> str:
        return f"rate:{self.top_speed}"

    def __repr__(self) -> str:
        # Never expose the key
        return f"Car(top_speed={self.top_speed}, fuel_litres={self.fuel_litres})"

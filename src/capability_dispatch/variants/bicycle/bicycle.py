"""Bicycle actor: a pre-existing type with its own operation names."""


class Bicycle:
    """A bicycle. Moves by pedalling and reports its speed."""

    def __init__(self, top_speed: int = 20):
        self.top_speed = top_speed
        self.pedal_strokes = 0

    def pedal(self) -> None:
        self.pedal_strokes += 1

    def speed(self) -> str:
        return f"rate:{self.top_speed}"

    def __repr__(self) -> str:
        return f"Bicycle(top_speed={self.top_speed})"

from __future__ import annotations

from collections.abc import Callable

from dynamics.api.markers import HasDynamicProperties, dynamic_property, has_dynamic_properties
from dynamics.api.setup import SetupRoutine, SetupService, create_setup_service
from dynamics.properties.collection import DynamicPropertyCollection
from dynamics.properties.declarative import setup_dynamic_properties


@has_dynamic_properties
class FakeSprite(DynamicPropertyCollection):
    def __init__(self, x: float = 0.0, alpha: float = 1.0, **kwargs: object) -> None:
        self._x = x
        self._alpha = alpha
        self.tint = "white"
        super().__init__(**kwargs)

    @dynamic_property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = value

    @dynamic_property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._alpha = value

    @property
    def width(self) -> float:
        return 32.0

    def bounds(self) -> tuple[float, float]:
        return (self._x, self._x + self.width)

    def __str__(self) -> str:
        return f"FakeSprite(x={self._x})"


@has_dynamic_properties("x")
class FakeListedSprite(FakeSprite):
    pass


@has_dynamic_properties("x", "width")
class FakeInvalidListedSprite(FakeSprite):
    pass


@has_dynamic_properties
class FakeRenderPacket(DynamicPropertyCollection):
    def __init__(self, **kwargs: object) -> None:
        self._blend_state = "alpha"
        self.applied: list[object] = []
        super().__init__(**kwargs)

    @dynamic_property
    def sort_mode(self) -> str:
        return "deferred"

    @dynamic_property
    def blend_state(self) -> str:
        return self._blend_state

    @blend_state.setter
    def blend_state(self, value: str) -> None:
        self._blend_state = value

    def _apply_effect(self, value: object) -> None:
        self.applied.append(value)

    effect = dynamic_property(None, _apply_effect)


class FakePlainObject(DynamicPropertyCollection):
    @dynamic_property
    def ignored(self) -> int:
        return 1


class CountingHandler:
    """Dynamic-property handler wrapper that records each once-per-type invocation."""

    def __init__(self, inner: Callable[[type, object], SetupRoutine] = setup_dynamic_properties) -> None:
        self._inner = inner
        self.calls: list[type] = []

    def __call__(self, owner_type: type, marker: object) -> SetupRoutine:
        self.calls.append(owner_type)
        return self._inner(owner_type, marker)


def make_counting_service() -> tuple[SetupService, CountingHandler]:
    handler = CountingHandler()
    service = create_setup_service()
    service.register_handler(HasDynamicProperties, handler)
    return service, handler

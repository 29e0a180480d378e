from __future__ import annotations

import pytest

from dynamics.api.markers import (
    HasDynamicProperties,
    attach_marker,
    dynamic_property,
    find_marker,
    has_dynamic_properties,
    is_dynamic_property,
    mark_dynamic,
)


def test_bare_decorator_attaches_marker_without_allow_list() -> None:
    @has_dynamic_properties
    class _Owner:
        pass

    marker = find_marker(_Owner, HasDynamicProperties)
    assert marker == HasDynamicProperties()
    assert marker.has_name_list is False


def test_called_decorator_attaches_allow_list() -> None:
    @has_dynamic_properties("x", "y")
    class _Owner:
        pass

    marker = find_marker(_Owner, HasDynamicProperties)
    assert marker is not None
    assert marker.names == ("x", "y")
    assert marker.has_name_list is True


def test_empty_call_behaves_like_bare_decorator() -> None:
    @has_dynamic_properties()
    class _Owner:
        pass

    assert find_marker(_Owner, HasDynamicProperties) == HasDynamicProperties()


def test_decorator_rejects_blank_names() -> None:
    with pytest.raises(ValueError):
        has_dynamic_properties("x", " ")


def test_marker_is_inherited_and_overridable() -> None:
    @has_dynamic_properties
    class _Base:
        pass

    class _Child(_Base):
        pass

    @has_dynamic_properties("only")
    class _Restricted(_Base):
        pass

    assert find_marker(_Child, HasDynamicProperties) == HasDynamicProperties()
    assert find_marker(_Restricted, HasDynamicProperties) == HasDynamicProperties(names=("only",))
    assert find_marker(_Base, HasDynamicProperties) == HasDynamicProperties()
    assert find_marker(object, HasDynamicProperties) is None


def test_attach_marker_keeps_other_marker_kinds() -> None:
    class _Other:
        pass

    class _Owner:
        pass

    other = _Other()
    attach_marker(_Owner, other)
    has_dynamic_properties(_Owner)
    assert find_marker(_Owner, _Other) is other
    assert find_marker(_Owner, HasDynamicProperties) is not None


def test_dynamic_property_behaves_like_property() -> None:
    class _Owner:
        def __init__(self) -> None:
            self._v = 1

        @dynamic_property
        def value(self) -> int:
            return self._v

        @value.setter
        def value(self, new: int) -> None:
            self._v = new

    owner = _Owner()
    owner.value = 4
    assert owner.value == 4
    assert is_dynamic_property(_Owner.__dict__["value"])


def test_mark_dynamic_converts_plain_property() -> None:
    plain = property(lambda self: 1)
    marked = mark_dynamic(plain)
    assert is_dynamic_property(marked)
    assert not is_dynamic_property(plain)
    assert marked.fget is plain.fget
    assert mark_dynamic(marked) is marked
    with pytest.raises(TypeError):
        mark_dynamic(lambda self: 1)  # type: ignore[arg-type]

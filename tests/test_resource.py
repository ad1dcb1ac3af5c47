import pytest

from skirmish.domain.entities import BoundedResource
from skirmish.domain.errors import ValidationError


def test_add_returns_new_instance_with_sum() -> None:
    resource = BoundedResource(16)

    added = resource.add(4)

    assert added.value == 20
    assert resource.value == 16
    assert added is not resource


def test_add_clamps_at_ceiling() -> None:
    assert BoundedResource(990).add(50).value == 999
    assert BoundedResource(999).add(1).value == 999


def test_subtract_clamps_at_floor() -> None:
    assert BoundedResource(10).subtract(25).value == 0
    assert BoundedResource(0).subtract(1).is_zero


@pytest.mark.parametrize("start", [0, 1, 500, 998, 999])
@pytest.mark.parametrize("delta", [-5000, -1, 0, 1, 999, 5000])
def test_arithmetic_never_leaves_bounds(start: int, delta: int) -> None:
    resource = BoundedResource(start)

    assert 0 <= resource.add(delta).value <= 999
    assert 0 <= resource.subtract(delta).value <= 999


@pytest.mark.parametrize("raw", [-1, 1000, 12.0, "12", None, True])
def test_create_rejects_values_outside_range_or_type(raw: object) -> None:
    with pytest.raises(ValidationError):
        BoundedResource.create(raw)


def test_create_reports_field_name() -> None:
    with pytest.raises(ValidationError) as excinfo:
        BoundedResource.create(1000, field="hp")

    assert excinfo.value.field == "hp"
    assert excinfo.value.value == 1000


def test_is_zero_only_for_zero() -> None:
    assert BoundedResource(0).is_zero
    assert not BoundedResource(1).is_zero


def test_resource_is_immutable() -> None:
    resource = BoundedResource(5)

    with pytest.raises(AttributeError):
        resource.value = 6  # type: ignore[misc]

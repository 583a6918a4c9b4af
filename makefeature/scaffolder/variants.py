"""Controller variants and the stub / test shape each one selects."""

from __future__ import annotations

from enum import Enum

from makefeature.errors import InvalidVariantError


class ControllerVariant(str, Enum):
    """The five controller archetypes offered to the user."""

    RESOURCE = "Resource"
    SINGLETON = "Singleton"
    API = "API"
    INVOKABLE = "Invokable"
    EMPTY = "Empty"

    @classmethod
    def choices(cls) -> list[str]:
        """Display values in prompt order."""
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: str) -> "ControllerVariant":
        """Resolve a user-supplied value (case-insensitive).

        Raises:
            InvalidVariantError: If *value* names no variant.
        """
        needle = value.strip().lower()
        for member in cls:
            if member.value.lower() == needle:
                return member
        raise InvalidVariantError(value, cls.choices())


class TestShape(str, Enum):
    """Shape of the primary generated test class."""

    FULL_CRUD = "full-crud"
    SMOKE = "smoke"


_STUB_KEYS: dict[ControllerVariant, str] = {
    ControllerVariant.RESOURCE: "controller.model.api.stub",
    ControllerVariant.API: "controller.api.stub",
    ControllerVariant.SINGLETON: "controller.singleton.api.stub",
    ControllerVariant.INVOKABLE: "controller.invokable.stub",
    ControllerVariant.EMPTY: "controller.plain.stub",
}


def stub_key_for(variant: ControllerVariant) -> str:
    """Return the controller stub file name for *variant*."""
    return _STUB_KEYS[variant]


def test_shape_for(variant: ControllerVariant) -> TestShape:
    """Full CRUD test stubs for Resource controllers, a smoke test otherwise."""
    if variant is ControllerVariant.RESOURCE:
        return TestShape.FULL_CRUD
    return TestShape.SMOKE

"""Tests for handler identifier resolution."""

from collections import OrderedDict

import pytest

from service_registry import (
    HandlerResolutionError,
    ProviderValidationError,
    Service,
    handler_identifier,
    resolve_handler,
)
from service_registry.handlers import resolve_service_class


class ClockService(Service):
    name = "clock"


class TestHandlerIdentifier:
    """Tests for handler_identifier()."""

    def test_identifier_uses_entry_point_form(self) -> None:
        """Identifier is "module:QualifiedName"."""
        assert handler_identifier(OrderedDict) == "collections:OrderedDict"

    def test_identifier_of_local_class_resolves_back(self) -> None:
        """An identifier built from a module-level class resolves to it."""
        assert resolve_handler(handler_identifier(ClockService)) is ClockService


class TestResolveHandler:
    """Tests for resolve_handler()."""

    def test_resolves_entry_point_form(self) -> None:
        """The "module:Class" form is supported."""
        assert resolve_handler("collections:OrderedDict") is OrderedDict

    def test_resolves_dotted_form(self) -> None:
        """The "module.Class" form is supported."""
        assert resolve_handler("collections.OrderedDict") is OrderedDict

    def test_unknown_module_raises(self) -> None:
        """A module that cannot be imported is reported."""
        with pytest.raises(HandlerResolutionError, match="Cannot import module"):
            resolve_handler("no_such_module_xyz:Thing")

    def test_unknown_attribute_raises(self) -> None:
        """A missing attribute is reported."""
        with pytest.raises(HandlerResolutionError, match="not found"):
            resolve_handler("collections:NoSuchThing")

    def test_non_class_raises(self) -> None:
        """Identifiers must name a class."""
        with pytest.raises(HandlerResolutionError, match="not a class"):
            resolve_handler("collections:namedtuple")

    @pytest.mark.parametrize("identifier", ["", "OrderedDict", ":OrderedDict", "collections:"])
    def test_malformed_identifier_raises(self, identifier: str) -> None:
        """Identifiers need both a module and an attribute part."""
        with pytest.raises(HandlerResolutionError):
            resolve_handler(identifier)


class TestResolveServiceClass:
    """Tests for resolve_service_class()."""

    def test_returns_service_class(self) -> None:
        """Service subclasses are accepted."""
        assert resolve_service_class(handler_identifier(ClockService)) is ClockService

    def test_rejects_class_not_implementing_contract(self) -> None:
        """Classes that are not ServiceInterface subclasses are rejected."""
        with pytest.raises(ProviderValidationError, match="not valid service class"):
            resolve_service_class("collections:OrderedDict")

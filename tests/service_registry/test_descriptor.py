"""Tests for ServiceDescriptor."""

import pytest
from pydantic import ValidationError

from service_registry import (
    ProviderValidationError,
    Service,
    ServiceDescriptor,
    handler_identifier,
)


class NotifierService(Service):
    name = "notifier"
    title = "Notifier"
    description = "Sends notifications"
    includes = ["mailer"]


class TestServiceDescriptor:
    """Test ServiceDescriptor construction and validation."""

    def test_from_properties_applies_defaults(self) -> None:
        """Title and description default to None, include to an empty list."""
        descriptor = ServiceDescriptor.from_properties(
            {"name": "mailer", "handler": "app.mail:SmtpMailer"}
        )

        assert descriptor.name == "mailer"
        assert descriptor.handler == "app.mail:SmtpMailer"
        assert descriptor.title is None
        assert descriptor.description is None
        assert descriptor.include == []

    def test_from_properties_treats_null_include_as_empty(self) -> None:
        """A null include list is normalised to an empty list."""
        descriptor = ServiceDescriptor.from_properties(
            {"name": "mailer", "handler": "app.mail:SmtpMailer", "include": None}
        )

        assert descriptor.include == []

    @pytest.mark.parametrize(
        "properties",
        [
            {"handler": "app.mail:SmtpMailer"},
            {"name": "", "handler": "app.mail:SmtpMailer"},
            {"name": "mailer"},
            {"name": "mailer", "handler": None},
        ],
    )
    def test_from_properties_requires_name_and_handler(
        self, properties: dict[str, str | None]
    ) -> None:
        """Name and handler are required."""
        with pytest.raises(ProviderValidationError, match="name or handler"):
            ServiceDescriptor.from_properties(properties)

    def test_from_properties_rejects_unknown_fields(self) -> None:
        """Records with fields outside the descriptor are rejected."""
        with pytest.raises(ProviderValidationError, match="mailer"):
            ServiceDescriptor.from_properties(
                {"name": "mailer", "handler": "app.mail:SmtpMailer", "priority": 1}
            )

    def test_from_properties_rejects_invalid_include(self) -> None:
        """The include field must be a list of names."""
        with pytest.raises(ProviderValidationError):
            ServiceDescriptor.from_properties(
                {"name": "mailer", "handler": "app.mail:SmtpMailer", "include": 5}
            )

    def test_from_service_reads_provider_accessors(self) -> None:
        """A descriptor built from an instance uses its class and metadata."""
        descriptor = ServiceDescriptor.from_service(NotifierService())

        assert descriptor == ServiceDescriptor(
            name="notifier",
            handler=handler_identifier(NotifierService),
            title="Notifier",
            description="Sends notifications",
            include=["mailer"],
        )

    def test_from_service_uses_instance_overrides(self) -> None:
        """Metadata set on the instance wins over class attributes."""
        service = NotifierService()
        service.service_name = "alerts"

        assert ServiceDescriptor.from_service(service).name == "alerts"

    def test_descriptor_is_immutable(self) -> None:
        """Descriptors cannot be modified after creation."""
        descriptor = ServiceDescriptor(name="mailer", handler="app.mail:SmtpMailer")

        with pytest.raises(ValidationError):
            descriptor.name = "other"  # type: ignore[misc]

    def test_to_properties_returns_persisted_record(self) -> None:
        """to_properties() produces the record written to the config file."""
        descriptor = ServiceDescriptor(
            name="mailer", handler="app.mail:SmtpMailer", include=["settings"]
        )

        assert descriptor.to_properties() == {
            "name": "mailer",
            "handler": "app.mail:SmtpMailer",
            "title": None,
            "description": None,
            "include": ["settings"],
        }
        assert ServiceDescriptor.from_properties(descriptor.to_properties()) == descriptor

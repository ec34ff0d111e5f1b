"""Tests for the provider factory."""

import pytest

from keycloak_federation import (
    PROVIDER_ID,
    ConfigurationError,
    FederationBridge,
    FederationProviderFactory,
    PropertyType,
)

from .conftest import FEDERATION_ID, LOCAL_REALM, REMOTE_URL


@pytest.fixture
def factory(settings):
    return FederationProviderFactory(settings=settings)


class TestFederationProviderFactory:
    """Test FederationProviderFactory."""

    def test_provider_id(self, factory):
        assert factory.id == PROVIDER_ID == "Keycloak"

    def test_config_properties(self, factory):
        properties = {p.name: p for p in factory.get_config_properties()}

        assert list(properties) == [
            "keycloak.url",
            "keycloak.skip_certificate_validation",
            "keycloak.realm",
            "keycloak.client_id",
            "keycloak.client_secret",
        ]
        assert properties["keycloak.client_secret"].secret
        assert properties["keycloak.skip_certificate_validation"].type is PropertyType.BOOLEAN
        assert properties["keycloak.skip_certificate_validation"].default_value is False
        assert not properties["keycloak.url"].secret

    def test_config_properties_are_copied(self, factory):
        factory.get_config_properties().clear()

        assert len(factory.get_config_properties()) == 5

    def test_validate_configuration(self, factory, federation_properties):
        config = factory.validate_configuration(federation_properties)

        assert config.remote_base_url == REMOTE_URL
        assert config.skip_certificate_validation is False

    def test_validate_rejects_relative_url(self, factory, federation_properties):
        federation_properties["keycloak.url"] = ["remote.example.com/auth"]

        with pytest.raises(ConfigurationError) as exc_info:
            factory.validate_configuration(federation_properties)

        assert exc_info.value.option == "keycloak.url"

    def test_validate_rejects_missing_secret(self, factory, federation_properties):
        del federation_properties["keycloak.client_secret"]

        with pytest.raises(ConfigurationError) as exc_info:
            factory.validate_configuration(federation_properties)

        assert str(exc_info.value) == "missing required option: keycloak.client_secret"

    @pytest.mark.asyncio
    async def test_create_returns_working_bridge(self, factory, federation_properties, storage, fake_remote):
        fake_remote.add_user("r1", "alice", "a@x.com")

        async with factory.create(
            FEDERATION_ID, federation_properties, storage, http_transport=fake_remote.transport()
        ) as bridge:
            assert isinstance(bridge, FederationBridge)
            record = await bridge.resolve_by_username(LOCAL_REALM, "alice")

        assert record.federation_link == FEDERATION_ID

"""Unit tests for the testing utilities."""

from unittest.mock import Mock

from named_di.application.container import Container
from named_di.domain import ContainerSettings
from named_di.infrastructure.testing import TestContainer, create_mock_container


def _parent_container():
    container = Container()
    container.set_factory("mailer", lambda c, name, options: "smtp mailer")
    container.set_factory("signup", lambda c, name, options: {"mailer": c.get("mailer")})
    container.set_alias("email", "mailer")
    return container


class TestTestContainer:
    """Test cases for TestContainer."""

    def test_is_a_container(self):
        """Test that TestContainer is a Container."""
        assert isinstance(TestContainer(), Container)

    def test_inherits_parent_registrations(self):
        """Test that registrations of the parent are available."""
        test_container = TestContainer(_parent_container())

        assert test_container.get("signup") == {"mailer": "smtp mailer"}
        assert test_container.has("email")

    def test_inherits_parent_settings(self):
        """Test that the parent's settings are reused by default."""
        parent = Container(settings=ContainerSettings(auto_construct=False))
        assert TestContainer(parent).settings.auto_construct is False

    def test_mock_service_replaces_dependency(self):
        """Test that a mocked service is injected into dependents."""
        test_container = TestContainer(_parent_container())
        mock_mailer = Mock()

        test_container.mock_service("mailer", mock_mailer)

        assert test_container.get("signup") == {"mailer": mock_mailer}

    def test_mock_service_through_alias(self):
        """Test that mocking an alias replaces the aliased service."""
        test_container = TestContainer(_parent_container())
        mock_mailer = Mock()

        test_container.mock_service("email", mock_mailer)

        assert test_container.get("mailer") is mock_mailer
        assert test_container.get("email") is mock_mailer

    def test_overrides_do_not_leak_to_parent(self):
        """Test that the parent container is unaffected by overrides."""
        parent = _parent_container()
        test_container = TestContainer(parent)

        test_container.mock_service("mailer", Mock())

        assert parent.get("mailer") == "smtp mailer"

    def test_mock_factory_discards_cached_instance(self):
        """Test that mock_factory takes effect even after the service was cached."""
        test_container = TestContainer(_parent_container())
        assert test_container.get("mailer") == "smtp mailer"

        test_container.mock_factory("mailer", lambda c, name, options: "fake mailer")

        assert test_container.get("mailer") == "fake mailer"

    def test_reset_overrides_restores_parent_registrations(self):
        """Test that reset_overrides restores the parent's registrations."""
        test_container = TestContainer(_parent_container())
        test_container.mock_service("mailer", Mock())
        test_container.set("extra", 1)

        test_container.reset_overrides()

        assert test_container.get("mailer") == "smtp mailer"
        assert not test_container.has("extra")
        assert test_container._overrides == {}

    def test_reset_overrides_without_parent(self):
        """Test that reset_overrides empties a parentless container."""
        test_container = TestContainer()
        test_container.mock_service("mailer", Mock())

        test_container.reset_overrides()

        assert not test_container.has("mailer")

    def test_context_manager_cleans_up(self):
        """Test that leaving the context resets overrides."""
        parent = _parent_container()

        with TestContainer(parent) as test_container:
            test_container.mock_service("mailer", "mocked")
            assert test_container.get("mailer") == "mocked"

        assert test_container.get("mailer") == "smtp mailer"


class TestCreateMockContainer:
    """Test cases for create_mock_container."""

    def test_creates_container_with_mocks(self):
        """Test that each pair is registered as a mocked service."""
        db, cache = Mock(), Mock()

        container = create_mock_container(("db", db), ("cache", cache))

        assert isinstance(container, TestContainer)
        assert container.get("db") is db
        assert container.get("cache") is cache

    def test_creates_empty_container(self):
        """Test that no arguments yields an empty container."""
        assert not create_mock_container().has("db")

"""Unit tests for the class loaders."""

from collections import OrderedDict
from datetime import date

import pytest

from named_di.application.class_loader import ImportClassLoader, RegistryClassLoader
from named_di.domain import IClassLoader, InvalidArgumentError, ServiceFactoryError


class TestImportClassLoader:
    """Test cases for ImportClassLoader."""

    def test_implements_interface(self):
        """Test that ImportClassLoader implements IClassLoader."""
        assert isinstance(ImportClassLoader(), IClassLoader)

    @pytest.mark.parametrize(
        "identifier, expected",
        [
            ("collections.OrderedDict", OrderedDict),
            ("datetime.date", date),
            ("datetime:date", date),
            ("collections:OrderedDict", OrderedDict),
        ],
    )
    def test_loads_classes(self, identifier, expected):
        """Test loading classes from dotted and colon paths."""
        assert ImportClassLoader().load(identifier) is expected

    def test_loads_nested_class_with_colon_path(self):
        """Test that colon paths may traverse attributes to nested classes."""
        import argparse

        loaded = ImportClassLoader().load("argparse:_SubParsersAction._ChoicesPseudoAction")

        assert loaded is argparse._SubParsersAction._ChoicesPseudoAction

    @pytest.mark.parametrize(
        "identifier",
        [
            "Missing",
            "",
            "no_such_module.Thing",
            "collections.NoSuchClass",
            "os.path",
            "os.sep",
            "json.dumps",
            ":Thing",
            "collections:",
            ".relative",
            ".a.B",
            ".settings:Config",
        ],
    )
    def test_unloadable_identifiers(self, identifier):
        """Test that identifiers not naming a class are not loadable."""
        loader = ImportClassLoader()
        assert loader.load(identifier) is None
        assert loader.is_loadable(identifier) is False

    def test_non_string_identifier(self):
        """Test that non-string identifiers are not loadable."""
        assert ImportClassLoader().load(None) is None

    def test_module_raising_on_import(self, tmp_path, monkeypatch):
        """Test that a module failing while importing raises ServiceFactoryError."""
        (tmp_path / "named_di_broken_module.py").write_text("raise RuntimeError('boom at import')\n")
        monkeypatch.syspath_prepend(str(tmp_path))

        with pytest.raises(ServiceFactoryError) as exc_info:
            ImportClassLoader().load("named_di_broken_module.Service")

        error = exc_info.value
        assert error.service_name == "named_di_broken_module.Service"
        assert isinstance(error.cause, RuntimeError)
        assert error.__cause__ is error.cause
        assert "boom at import" in str(error)


class TestRegistryClassLoader:
    """Test cases for RegistryClassLoader."""

    def test_loads_registered_classes(self):
        """Test that registered identifiers load their class."""

        class Mailer:
            pass

        loader = RegistryClassLoader({"mailer": Mailer})

        assert loader.load("mailer") is Mailer
        assert loader.is_loadable("mailer")
        assert not loader.is_loadable("other")

    def test_register_is_chainable(self):
        """Test that register returns the loader."""
        loader = RegistryClassLoader()
        assert loader.register("dict", dict) is loader
        assert loader.load("dict") is dict

    def test_register_rejects_non_classes(self):
        """Test that only classes can be registered."""
        with pytest.raises(InvalidArgumentError):
            RegistryClassLoader({"factory": lambda: None})

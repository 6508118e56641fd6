"""Pytest configuration and fixtures for neo-grants tests."""

import pytest

from neo_grants import HasPermissions, get_permission_catalog, get_settings, get_type_aliases


class Document(HasPermissions):
    """Model with an integer primary key."""

    def __init__(self, id=None):
        self.id = id

    def get_key(self):
        return self.id


class Folder(HasPermissions):
    """Second model type sharing permission names with Document."""

    def __init__(self, id=None):
        self.id = id

    def get_key(self):
        return self.id


class Memo:
    """Object without an identifier accessor."""


@pytest.fixture(autouse=True)
def reset_registries():
    """Start every test with an empty catalog, alias map and fresh settings."""
    get_settings.cache_clear()
    get_permission_catalog().reset()
    get_type_aliases().clear()
    yield
    get_permission_catalog().reset()
    get_type_aliases().clear()
    get_settings.cache_clear()


@pytest.fixture
def catalog():
    """Process-wide catalog with sample permissions registered."""
    catalog = get_permission_catalog()
    catalog.register(None, {
        "simple-permission": lambda: "Simple Permission",
    })
    catalog.register(Document, {
        "view": lambda: "View Document",
        "edit": lambda: "Edit Document",
    })
    catalog.register(Folder, {
        "view": lambda: "View Folder",
    })
    get_type_aliases().register({
        "document": Document,
        "folder": Folder,
    })
    return catalog


@pytest.fixture
def document_cls():
    return Document


@pytest.fixture
def folder_cls():
    return Folder


@pytest.fixture
def memo_cls():
    return Memo


@pytest.fixture
def view(catalog):
    """Class-level permission ``document.view``."""
    return catalog.find("document.view")


@pytest.fixture
def edit(catalog):
    """Object-level permission ``document.edit``."""
    return catalog.find("document.edit")


@pytest.fixture
def simple(catalog):
    """Global permission ``simple-permission``."""
    return catalog.find("simple-permission")


@pytest.fixture
def folder_view(catalog):
    return catalog.find("folder.view")

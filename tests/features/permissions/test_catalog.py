"""Tests for the permission catalog and type aliases."""

import pytest

from neo_grants import PermissionCatalog, TypeAliasRegistry, get_permission_catalog, type_identifier
from neo_grants.features.permissions import PendingDefinitions


class TestPermissionCatalog:
    """Registration, lookup and reset."""

    def test_register_and_find(self, catalog):
        simple = catalog.find("simple-permission")
        assert simple is not None
        assert simple.get_key() == "simple-permission"

        view = catalog.find("document.view")
        assert view is not None
        assert view.get_key() == "document.view"
        assert view.qualifier == "document"
        assert view.name == "view"

    def test_find_unknown(self, catalog):
        assert catalog.find("document.frobnicate") is None
        assert catalog.find("view") is None

    def test_resolve(self, catalog, document_cls):
        assert catalog.resolve("simple-permission", None).key == "simple-permission"
        assert catalog.resolve("view", document_cls).key == "document.view"
        assert catalog.resolve("view", type_identifier(document_cls)).key == "document.view"
        assert catalog.resolve("view", "document").key == "document.view"
        assert catalog.resolve("view", None) is None
        assert catalog.resolve("frobnicate", document_cls) is None

    def test_all(self, catalog):
        permissions = catalog.all()

        assert len(permissions) == 4
        assert set(permissions) == {"simple-permission", "document.view", "document.edit", "folder.view"}

    def test_for_type(self, catalog, document_cls, folder_cls):
        document_permissions = catalog.for_type(document_cls)
        assert set(document_permissions) == {"view", "edit"}
        assert document_permissions["edit"].key == "document.edit"

        assert set(catalog.for_type(folder_cls)) == {"view"}
        assert set(catalog.for_type(None)) == {"simple-permission"}

    def test_instances_are_cached(self, catalog):
        assert catalog.find("document.view") is catalog.find("document.view")
        assert catalog.resolve("view", "document") is catalog.all()["document.view"]

    def test_first_registration_wins(self, catalog, document_cls):
        catalog.register(document_cls, {"view": "Overridden", "share": "Share Document"})

        assert catalog.find("document.view").get_label() == "View Document"
        assert catalog.find("document.share").get_label() == "Share Document"

    def test_registration_after_lookup(self, catalog, document_cls):
        assert catalog.find("document.delete") is None

        catalog.register(document_cls, {"delete": "Delete Document", "view": "Ignored"})

        assert catalog.find("document.delete") is not None
        assert catalog.find("document.view").get_label() == "View Document"

    def test_qualifier_uses_aliases_known_at_first_lookup(self):
        class Invoice:
            pass

        catalog = PermissionCatalog(aliases=TypeAliasRegistry())
        catalog.register(Invoice, {"pay": "Pay invoice"})
        catalog.aliases.register({"invoice": Invoice})

        assert catalog.find("invoice.pay") is not None

    def test_unaliased_types_are_qualified_by_identifier(self):
        class Receipt:
            pass

        catalog = PermissionCatalog(aliases=TypeAliasRegistry())
        catalog.register(Receipt, {"print": "Print receipt"})

        assert catalog.find(f"{type_identifier(Receipt)}.print") is not None
        assert catalog.resolve("print", Receipt) is not None

    def test_empty_type_registers_global_permissions(self):
        catalog = PermissionCatalog(aliases=TypeAliasRegistry())
        catalog.register("", {"impersonate": "Impersonate users"})

        permission = catalog.find("impersonate")
        assert permission.is_global
        assert permission.qualifier is None

    def test_reset(self, catalog):
        assert catalog.find("document.view") is not None

        catalog.reset()

        assert catalog.find("document.view") is None
        assert len(catalog.all()) == 0

    def test_process_wide_catalog(self):
        assert get_permission_catalog() is get_permission_catalog()


class TestPendingDefinitions:
    """Mutable definitions builder."""

    def test_merge_keeps_first_label(self):
        pending = PendingDefinitions()
        pending.add(None, {"a": "first"})
        pending.add("", {"a": "second", "b": "other"})

        assert list(pending.drain()) == [(None, "a", "first"), (None, "b", "other")]
        assert not pending

    def test_clear(self):
        pending = PendingDefinitions()
        pending.add("app.Model", {"a": "A"})
        assert pending

        pending.clear()
        assert not pending


class TestTypeAliasRegistry:
    """Alias lookups in both directions."""

    def test_alias_lookups(self, document_cls):
        aliases = TypeAliasRegistry({"document": document_cls})

        assert aliases.alias_for(document_cls) == "document"
        assert aliases.alias_for(type_identifier(document_cls)) == "document"
        assert aliases.type_for("document") == type_identifier(document_cls)
        assert aliases.alias_for("app.Other") == "app.Other"
        assert aliases.type_for("other") is None

    def test_realias_replaces_previous_type(self):
        aliases = TypeAliasRegistry({"doc": "app.Document"})
        aliases.register({"doc": "app.Page"})

        assert aliases.type_for("doc") == "app.Page"
        assert aliases.alias_for("app.Page") == "doc"
        assert aliases.alias_for("app.Document") == "app.Document"

    def test_clear(self):
        aliases = TypeAliasRegistry({"doc": "app.Document"})
        aliases.clear()

        assert aliases.type_for("doc") is None

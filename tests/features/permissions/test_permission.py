"""Tests for the Permission value object and the HasPermissions mixin."""

from neo_grants import Permission


class TestPermission:
    """Keys, labels and applicability."""

    def test_key(self):
        assert Permission("document", "view", "View").key == "document.view"
        assert Permission(None, "simple", "Simple").key == "simple"
        assert Permission(None, "simple", "Simple").get_key() == "simple"

    def test_equality_by_key(self):
        first = Permission("document", "view", "View", "app.Document")
        second = Permission("document", "view", lambda: "Other label", "app.Other")

        assert first == second
        assert hash(first) == hash(second)
        assert first != Permission("document", "edit", "Edit", "app.Document")
        assert len({first, second}) == 1

    def test_static_label(self):
        assert Permission(None, "simple", "Simple Permission").get_label() == "Simple Permission"

    def test_dynamic_label(self):
        """Label producers are evaluated on every call."""
        locale = {"current": "en"}
        translations = {
            "en": "View Document",
            "fr": "Voir le Document",
        }
        permission = Permission("document", "view", lambda: translations[locale["current"]])

        assert permission.get_label() == "View Document"
        locale["current"] = "fr"
        assert permission.get_label() == "Voir le Document"

    def test_catalog_labels_follow_locale(self):
        from neo_grants import get_permission_catalog

        locale = {"current": "en"}
        labels = {"en": "Global Permission", "fr": "Permission Globale"}
        catalog = get_permission_catalog()
        catalog.register(None, {"global-permission": lambda: labels[locale["current"]]})
        permission = catalog.find("global-permission")

        assert permission.get_label() == "Global Permission"
        locale["current"] = "fr"
        assert permission.get_label() == "Permission Globale"

    def test_is_applicable_to(self, simple, view, document_cls, folder_cls):
        assert simple.is_applicable_to(None)
        assert not simple.is_applicable_to("any-string")
        assert not simple.is_applicable_to(folder_cls())

        assert not view.is_applicable_to(None)
        assert view.is_applicable_to(document_cls)
        assert view.is_applicable_to("document")
        assert not view.is_applicable_to(folder_cls)
        assert not view.is_applicable_to("folder")
        assert view.is_applicable_to(document_cls())
        assert not view.is_applicable_to(folder_cls())

    def test_is_applicable_to_subclasses(self, view, document_cls):
        class Report(document_cls):
            pass

        assert view.is_applicable_to(Report(1))
        assert view.is_applicable_to(Report)

    def test_is_applicable_to_primitive_values(self, simple, view):
        assert not view.is_applicable_to(5)
        assert view.is_not_applicable_to([1])
        assert not simple.is_applicable_to(True)

    def test_is_not_applicable_to(self, simple, view, document_cls, folder_cls):
        assert not simple.is_not_applicable_to(None)
        assert simple.is_not_applicable_to("any-string")
        assert simple.is_not_applicable_to(folder_cls())

        assert view.is_not_applicable_to(None)
        assert not view.is_not_applicable_to(document_cls)
        assert view.is_not_applicable_to(folder_cls)
        assert not view.is_not_applicable_to(document_cls())
        assert view.is_not_applicable_to(folder_cls())

    def test_debug_info(self, view, document_cls):
        from neo_grants import type_identifier

        assert view.debug_info() == {
            "id": "document.view",
            "object_type": type_identifier(document_cls),
            "name": "view",
            "label": "View Document",
        }
        assert str(view) == "document.view"


class TestHasPermissions:
    """Model classes expose their registered permissions."""

    def test_get_permissions(self, catalog, document_cls, folder_cls):
        assert set(document_cls.get_permissions()) == {"view", "edit"}
        assert set(folder_cls.get_permissions()) == {"view"}

    def test_get_permission(self, catalog, document_cls):
        assert document_cls.get_permission("edit") is catalog.find("document.edit")
        assert document_cls.get_permission("frobnicate") is None

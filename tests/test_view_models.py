from unittest.mock import patch

from django import forms

from client_validation.view_models import (
    ViewModel,
    autodiscover_view_models,
    get_view_model_types,
    type_identifier,
)
from tests.view_models import (
    InvoiceViewModel,
    PersonViewModel,
    PlainForm,
    TrackedViewModel,
)


class TestDiscovery:
    def test_type_identifier_is_module_and_qualname(self):
        assert type_identifier(PersonViewModel) == "tests.view_models.PersonViewModel"

    def test_marked_forms_are_found(self):
        types = get_view_model_types()

        assert PersonViewModel in types
        assert InvoiceViewModel in types

    def test_unmarked_forms_and_plain_mixins_are_skipped(self):
        types = get_view_model_types()

        assert PlainForm not in types
        assert TrackedViewModel not in types
        assert ViewModel not in types

    def test_each_type_once_sorted_by_identifier(self):
        types = get_view_model_types()
        identifiers = [type_identifier(t) for t in types]

        assert len(set(types)) == len(types)
        assert identifiers == sorted(identifiers)

    def test_classes_defined_later_are_found_on_next_call(self):
        class LateViewModel(ViewModel, forms.Form):
            code = forms.CharField(max_length=5)

        assert LateViewModel in get_view_model_types()

    def test_custom_marker(self):
        assert get_view_model_types(TrackedViewModel) == [InvoiceViewModel]


class TestAutodiscover:
    def test_imports_configured_modules(self, settings):
        settings.CLIENT_VALIDATION_AUTODISCOVER_MODULES = ["view_models"]

        with patch("client_validation.view_models.autodiscover_modules") as autodiscover:
            autodiscover_view_models()

        autodiscover.assert_called_once_with("view_models")

    def test_defaults_to_forms_and_view_models(self, settings):
        del settings.CLIENT_VALIDATION_AUTODISCOVER_MODULES

        with patch("client_validation.view_models.autodiscover_modules") as autodiscover:
            autodiscover_view_models()

        autodiscover.assert_called_once_with("forms", "view_models")

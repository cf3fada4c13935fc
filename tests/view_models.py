"""Sample view models shared by the test suite."""
from decimal import Decimal

from django import forms
from django.core.validators import RegexValidator

from client_validation.attributes import UnobtrusiveValidationMixin
from client_validation.view_models import ViewModel


class PersonViewModel(ViewModel, forms.Form):
    Age = forms.IntegerField(min_value=0, max_value=120)
    Name = forms.CharField(max_length=50, required=False)
    Nickname = forms.CharField(required=False)


class EmptyViewModel(ViewModel, forms.Form):
    notes = forms.CharField(required=False)
    newsletter = forms.BooleanField(required=False)


class SignUpViewModel(ViewModel, forms.Form):
    username = forms.CharField(
        min_length=3,
        max_length=30,
        validators=[
            RegexValidator(r"^[a-zA-Z0-9_]+$", "Username can only contain letters, numbers, and underscores"),
        ],
    )
    email = forms.EmailField(error_messages={"required": "Email is required"})
    website = forms.URLField(required=False)
    birth_date = forms.DateField(required=False)
    display_name = forms.CharField(
        required=False,
        validators=[RegexValidator(r"^[^<>&]*$", "No markup allowed")],
    )


class TrackedViewModel(ViewModel):
    """Mixin extending the marker without being a form."""


class InvoiceViewModel(TrackedViewModel, forms.Form):
    client_name = forms.CharField(label="Client name", max_length=200)
    tax_rate = forms.DecimalField(min_value=Decimal("0"), max_value=Decimal("100"), required=False)
    quantity = forms.IntegerField(
        max_value=999,
        required=False,
        error_messages={"max_value": "No more than %(limit_value)s items per line."},
    )


class DynamicFieldsViewModel(ViewModel, forms.Form):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["reference"] = forms.CharField(min_length=3, required=False)


class PlainForm(forms.Form):
    title = forms.CharField(max_length=10)


class RenderedForm(UnobtrusiveValidationMixin, forms.Form):
    Age = forms.IntegerField(min_value=0, max_value=120)
    comment = forms.CharField(required=False)

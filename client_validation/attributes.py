"""
Unobtrusive ``data-val-*`` attributes for server-rendered forms.

jQuery Validation Unobtrusive reads rules straight off the input element:

    data-val="true"
    data-val-range="Age must be between 0 and 120."
    data-val-range-min="0"
    data-val-range-max="120"

These helpers render the same rule sets the JSON endpoint publishes, so a
form rendered by a template and a form built from the published rules behave
identically in the browser.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from django import forms

from .rules import ValidationRuleSet, get_field_rules


def _attribute_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def to_unobtrusive_attributes(rule_set: ValidationRuleSet) -> Dict[str, str]:
    if not rule_set:
        return {}

    attrs = {"data-val": "true"}
    for adapter, params in rule_set.items():
        attrs[f"data-val-{adapter}"] = str(params.get("message", ""))
        for name, value in params.items():
            if name == "message":
                continue
            attrs[f"data-val-{adapter}-{name}"] = _attribute_value(value)
    return attrs


def get_unobtrusive_validation_attributes(field_name: str, field: forms.Field) -> Dict[str, str]:
    return to_unobtrusive_attributes(get_field_rules(field_name, field))


class UnobtrusiveValidationMixin:
    """Form mixin that adds ``data-val-*`` attributes to every field's widget."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field_name, field in self.fields.items():
            field.widget.attrs.update(get_unobtrusive_validation_attributes(field_name, field))

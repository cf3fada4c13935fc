"""
Client Validation Rule Extraction

Turns the declarative constraints on a form's fields into rule sets keyed by
jQuery Validation Unobtrusive adapter name. The constraints read are the
required flag, the field type and ``django.core.validators`` instances.
Server validation stays authoritative; these rules only mirror it for UX.

Output shape:

    {
        "accounts.forms.SignUpForm": {
            "type": "accounts.forms.SignUpForm",
            "rules": {
                "age": {
                    "required": {"message": "This field is required."},
                    "number": {"message": "Enter a whole number."},
                    "range": {"message": "Age must be between 0 and 120.", "min": 0, "max": 120},
                },
            },
        },
    }
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from django import forms
from django.core import validators
from django.forms.utils import pretty_name
from django.utils.translation import gettext, gettext_noop

from .errors import RuleExtractionError, ViewModelInstantiationError
from .js_regex import UntranslatableRegexError, to_js_regex
from .view_models import get_view_model_types, type_identifier

logger = logging.getLogger(__name__)

RuleParams = Dict[str, Any]
ValidationRuleSet = Dict[str, RuleParams]
ClientValidationRules = Dict[str, Dict[str, Any]]

# Field types that get a type check on the client.
TYPE_ADAPTERS: Tuple[Tuple[type, str], ...] = (
    (forms.IntegerField, "number"),
    (forms.FloatField, "number"),
    (forms.DecimalField, "number"),
    (forms.DateTimeField, "date"),
    (forms.DateField, "date"),
)

LENGTH_MESSAGES = {
    "between": gettext_noop("%(label)s must be between %(min)s and %(max)s characters long."),
    "min": gettext_noop("%(label)s must be at least %(min)s characters long."),
    "max": gettext_noop("%(label)s must be at most %(max)s characters long."),
}

RANGE_MESSAGES = {
    "between": gettext_noop("%(label)s must be between %(min)s and %(max)s."),
    "min": gettext_noop("%(label)s must be greater than or equal to %(min)s."),
    "max": gettext_noop("%(label)s must be less than or equal to %(max)s."),
}


def _interpolate(message: Any, params: Dict[str, Any]) -> str:
    # Author overrides may reference params only known server-side (show_value).
    try:
        return str(message) % params
    except (KeyError, TypeError, ValueError):
        return str(message)


def _limit(validator: validators.BaseValidator) -> Any:
    limit = validator.limit_value
    return limit() if callable(limit) else limit


def _validator_message(field: forms.Field, validator: Any) -> str:
    code = getattr(validator, "code", None)
    message = field.error_messages.get(code) if code else None
    return str(message or validator.message)


def _type_adapter(field: forms.Field) -> Optional[str]:
    for field_class, adapter in TYPE_ADAPTERS:
        if isinstance(field, field_class):
            return adapter
    return None


def _bounded_rule(
    field: forms.Field,
    label: str,
    lower: Optional[Tuple[validators.BaseValidator, Any]],
    upper: Optional[Tuple[validators.BaseValidator, Any]],
    messages: Dict[str, str],
) -> RuleParams:
    params: RuleParams = {"label": label}
    rule: RuleParams = {}

    if lower is not None:
        params["min"] = rule["min"] = lower[1]
    if upper is not None:
        params["max"] = rule["max"] = upper[1]

    if lower is not None and upper is not None:
        message = gettext(messages["between"]) % params
    else:
        validator, limit = lower if lower is not None else upper
        override = field.error_messages.get(validator.code)
        if override:
            message = _interpolate(override, {"limit_value": limit, **params})
        else:
            message = gettext(messages["min" if lower is not None else "max"]) % params

    return {"message": message, **rule}


def get_field_rules(field_name: str, field: forms.Field) -> ValidationRuleSet:
    """Compute the client-side rule set for a single form field."""
    # Django ignores submitted data for disabled fields.
    if field.disabled:
        return {}

    label = str(field.label) if field.label else pretty_name(field_name)
    rules: ValidationRuleSet = {}

    if field.required:
        rules["required"] = {"message": str(field.error_messages["required"])}

    adapter = _type_adapter(field)
    if adapter:
        rules[adapter] = {"message": str(field.error_messages.get("invalid", gettext("Enter a valid value.")))}

    min_length = max_length = min_value = max_value = None

    for validator in field.validators:
        if isinstance(validator, validators.MinLengthValidator):
            limit = _limit(validator)
            if min_length is None or limit > min_length[1]:
                min_length = (validator, limit)
        elif isinstance(validator, validators.MaxLengthValidator):
            limit = _limit(validator)
            if max_length is None or limit < max_length[1]:
                max_length = (validator, limit)
        elif isinstance(validator, validators.MinValueValidator):
            limit = _limit(validator)
            if min_value is None or limit > min_value[1]:
                min_value = (validator, limit)
        elif isinstance(validator, validators.MaxValueValidator):
            limit = _limit(validator)
            if max_value is None or limit < max_value[1]:
                max_value = (validator, limit)
        elif isinstance(validator, validators.EmailValidator):
            rules.setdefault("email", {"message": _validator_message(field, validator)})
        elif isinstance(validator, validators.URLValidator):
            rules.setdefault("url", {"message": _validator_message(field, validator)})
        elif isinstance(validator, validators.RegexValidator):
            if validator.inverse_match:
                logger.debug(f"Skipping inverse-match regex on {field_name}: no client adapter")
            elif "regex" in rules:
                logger.debug(f"Skipping additional regex on {field_name}: one regex adapter per field")
            else:
                try:
                    pattern, flags = to_js_regex(validator.regex.pattern, validator.regex.flags)
                except UntranslatableRegexError as e:
                    logger.debug(f"Skipping regex on {field_name}: no JavaScript equivalent for {e}")
                else:
                    rules["regex"] = {"message": _validator_message(field, validator), "pattern": pattern}
                    if flags:
                        rules["regex"]["flags"] = flags
        else:
            logger.debug(f"No client adapter for {type(validator).__name__} on {field_name}")

    if min_length is not None or max_length is not None:
        rules["length"] = _bounded_rule(field, label, min_length, max_length, LENGTH_MESSAGES)
    if min_value is not None or max_value is not None:
        rules["range"] = _bounded_rule(field, label, min_value, max_value, RANGE_MESSAGES)

    return rules


def get_form_rules(form: forms.BaseForm) -> Dict[str, ValidationRuleSet]:
    """Rule sets for every field of ``form`` that has at least one rule."""
    validation_rules: Dict[str, ValidationRuleSet] = {}
    type_name = type_identifier(type(form))

    for field_name, field in form.fields.items():
        try:
            field_rules = get_field_rules(field_name, field)
        except Exception as e:
            logger.exception(f"Rule extraction failed for {type_name}.{field_name}: {e}")
            raise RuleExtractionError(type_name, field_name) from e

        if field_rules:
            validation_rules[field_name] = field_rules

    return validation_rules


def build_client_validation_rules(
    model_types: Optional[Iterable[type]] = None,
) -> ClientValidationRules:
    """
    Aggregate the rules of every view model into one mapping.

    Models are instantiated without arguments, so ``__init__`` customisations
    of ``fields`` are honoured. Any failure aborts the whole build; a partial
    rule set is never returned.
    """
    if model_types is None:
        model_types = get_view_model_types()

    client_validation_rules: ClientValidationRules = {}

    for model_type in model_types:
        type_name = type_identifier(model_type)

        try:
            form = model_type()
        except Exception as e:
            logger.exception(f"Could not instantiate view model {type_name}: {e}")
            raise ViewModelInstantiationError(type_name) from e

        validation_rules = get_form_rules(form)
        if not validation_rules:
            continue

        if type_name in client_validation_rules:
            logger.warning(f"Duplicate view model identifier {type_name}; keeping the last definition")
        client_validation_rules[type_name] = {"type": type_name, "rules": validation_rules}

    logger.info(f"Built client validation rules for {len(client_validation_rules)} view models")
    return client_validation_rules

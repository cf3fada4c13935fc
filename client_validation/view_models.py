"""
View Model Discovery

A view model is a Django form that opts into client-side rule export by
mixing in ``ViewModel``:

    class SignUpForm(ViewModel, forms.Form):
        ...

Discovery walks the live subclass tree of the marker, so forms defined in
modules imported after start-up are picked up on the next call.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Type

from django import forms
from django.utils.module_loading import autodiscover_modules

from .conf import get_autodiscover_modules

logger = logging.getLogger(__name__)


class ViewModel:
    """Marker mixin for forms whose validation rules are published to the browser."""


def type_identifier(model_type: type) -> str:
    return f"{model_type.__module__}.{model_type.__qualname__}"


def _walk_subclasses(cls: type) -> Iterator[type]:
    for subclass in cls.__subclasses__():
        yield subclass
        yield from _walk_subclasses(subclass)


def get_view_model_types(marker: type = ViewModel) -> List[Type[forms.BaseForm]]:
    """
    Return every form class deriving from ``marker``, sorted by identifier.

    Mixins that extend the marker without being forms are skipped; they
    cannot be instantiated into something with fields.
    """
    found = []
    for subclass in _walk_subclasses(marker):
        if subclass in found:
            continue
        if not issubclass(subclass, forms.BaseForm):
            logger.debug(f"Skipping non-form view model mixin {type_identifier(subclass)}")
            continue
        found.append(subclass)

    found.sort(key=type_identifier)
    return found


def autodiscover_view_models() -> None:
    """Import the view model modules of every installed app."""
    module_names = get_autodiscover_modules()
    autodiscover_modules(*module_names)
    logger.info(
        f"Discovered {len(get_view_model_types())} view models "
        f"(modules searched: {', '.join(module_names)})"
    )

"""
Where an editable column gets its edit control from.

``ControlSource`` is a tagged value: the default text input, a prototype
field cloned per use, or a factory called with ``(container, name)``.
``resolve_control`` is the single place that turns it into a control.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from django import forms

from ...config import get_grido_settings
from ...exceptions import EditableControlError, InvalidArgumentError
from ...forms import FormContainer, FormControl

logger = logging.getLogger(__name__)

ControlFactory = Callable[[FormContainer, str], Any]


class ControlSourceKind(str, Enum):
    DEFAULT = "default"
    PROTOTYPE = "prototype"
    FACTORY = "factory"


@dataclass(frozen=True)
class ControlSource:
    kind: ControlSourceKind = ControlSourceKind.DEFAULT
    prototype: Optional[forms.Field] = None
    factory: Optional[ControlFactory] = None

    @classmethod
    def default(cls) -> "ControlSource":
        return cls()

    @classmethod
    def from_value(cls, control: Any) -> "ControlSource":
        """
        Build a source from a field instance or a factory callable.

        Raises:
            InvalidArgumentError: If ``control`` is neither.
        """
        if isinstance(control, forms.Field):
            return cls(kind=ControlSourceKind.PROTOTYPE, prototype=control)
        if callable(control):
            return cls(kind=ControlSourceKind.FACTORY, factory=control)
        raise InvalidArgumentError(
            "Editable control must be a django.forms.Field instance or a callable, "
            f"got {type(control).__name__}"
        )

    @property
    def is_default(self) -> bool:
        return self.kind is ControlSourceKind.DEFAULT


def resolve_control(source: ControlSource, container: FormContainer, name: Any) -> FormControl:
    """
    Create the edit control for ``name`` inside ``container``.

    Raises:
        EditableControlError: If the prototype or factory did not yield a form field.
    """
    name = str(name)

    if source.kind is ControlSourceKind.DEFAULT:
        control = container.add_text(name)
        control.add_class(get_grido_settings().default_control_css_class)
        return control

    if source.kind is ControlSourceKind.PROTOTYPE:
        resolved: Any = copy.deepcopy(source.prototype)
    elif source.kind is ControlSourceKind.FACTORY:
        resolved = source.factory(container, name)
    else:
        raise EditableControlError(f"Unknown control source '{source.kind}'")

    if isinstance(resolved, FormControl):
        if resolved.container is not container or resolved.name != name:
            resolved = container.add_control(name, resolved.field)
        logger.debug(f"Resolved edit control {resolved!r} from {source.kind.value}")
        return resolved

    if not isinstance(resolved, forms.Field):
        raise EditableControlError(
            f"Editable control is not an instance of django.forms.Field, "
            f"got {type(resolved).__name__}"
        )

    control = container.add_control(name, resolved)
    logger.debug(f"Resolved edit control {control!r} from {source.kind.value}")
    return control

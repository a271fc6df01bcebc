"""Domain models describing a presenter's schema."""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

__all__ = [
    "Handler",
    "OMIT",
    "PropertySpec",
    "LinkSpec",
    "EmbedSpec",
    "LetSpec",
]

Handler = Callable[[Any, Any], Any]
"""A schema handler, invoked as ``handler(resource, context)``."""


class _Omit:
    """Marker returned by a handler to leave its field out of the document."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "OMIT"

    def __bool__(self):
        return False


OMIT = _Omit()


@dataclass(frozen=True)
class PropertySpec:
    """Describes a property exposed on the presented document.

    Attributes:
        handler: Computes the value. None means the same-named attribute is
            read off the resource.
        presenter: Presenter used to present a non-nil value recursively.
        ignore_nil: Leave the property out when its value is None.
    """

    handler: Optional[Handler] = None
    presenter: Optional[type] = None
    ignore_nil: bool = False


@dataclass(frozen=True)
class LinkSpec:
    """Describes a link rendered under ``_links``.

    Attributes:
        handler: Computes the link's ``href``.
        attributes: Literal attributes merged alongside ``href``
            (for example ``templated`` or ``title``).
        ignore_nil: Leave the link out when its ``href`` is None.
    """

    handler: Handler
    attributes: dict[str, Any] = field(default_factory=dict)
    ignore_nil: bool = False


@dataclass(frozen=True)
class EmbedSpec:
    """Describes a sub-resource rendered under ``_embedded``.

    Unlike a property, an embed always carries a handler: when none is
    declared, one reading the same-named attribute is synthesised.
    """

    handler: Handler
    presenter: Optional[type] = None
    ignore_nil: bool = False


@dataclass(frozen=True)
class LetSpec:
    """A virtual attribute computed at most once per presentation."""

    handler: Handler

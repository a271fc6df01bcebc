"""Root key derivation for presented resources.

When a presentation is not given an explicit ``root`` option, the presented
document is wrapped under a key derived from the resource's type: its
singular name for a single resource, its plural name for a sequence.
Types that expose no name are presented without a root.

Resource types opt in by carrying a :class:`ModelName`, most conveniently
through the :func:`named` decorator:

    >>> @named()
    ... class BlogPost:
    ...     pass
    >>> BlogPost.model_name
    ModelName(singular='blog_post', plural='blog_posts')
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional, Protocol

__all__ = [
    "ModelName",
    "NameDeriver",
    "ModelNameDeriver",
    "named",
    "underscore",
    "sequence_element_type",
]


@dataclass(frozen=True)
class ModelName:
    """The singular and plural names of a resource type."""

    singular: str
    plural: str

    @classmethod
    def for_class(cls, target: type, singular: Optional[str] = None,
                  plural: Optional[str] = None) -> "ModelName":
        singular = singular or underscore(target.__name__)
        return cls(singular, plural or singular + "s")


class NameDeriver(Protocol):
    """Derives root keys from resource types."""

    def singular_name(self, resource_type: type) -> Optional[str]:
        ...

    def plural_name(self, resource_type: type) -> Optional[str]:
        ...


class ModelNameDeriver:
    """Reads names from a ``model_name`` attribute on the resource type.

    The attribute may hold a :class:`ModelName` or a plain string, in which
    case the plural is the string with an ``s`` appended.
    """

    def singular_name(self, resource_type: type) -> Optional[str]:
        model_name = _model_name(resource_type)
        return model_name.singular if model_name else None

    def plural_name(self, resource_type: type) -> Optional[str]:
        model_name = _model_name(resource_type)
        return model_name.plural if model_name else None


def named(singular: Optional[str] = None, plural: Optional[str] = None):
    """Class decorator attaching a :class:`ModelName` to a resource type.

    Args:
        singular: The singular name; defaults to the snake_cased class name.
        plural: The plural name; defaults to the singular name plus ``s``.
    """

    def decorator(target: type) -> type:
        target.model_name = ModelName.for_class(target, singular, plural)
        return target

    return decorator


def underscore(name: str) -> str:
    """Convert a CamelCase class name to snake_case.

    Example:
        >>> underscore("HTTPRequestLog")
        'http_request_log'
    """
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.replace("-", "_").lower()


def sequence_element_type(resources: Sequence) -> Optional[type]:
    """Return the common type of a sequence's elements.

    Returns:
        The type shared by every element, or None for an empty or
        heterogeneous sequence.
    """
    if not resources:
        return None
    element_type = type(resources[0])
    if all(type(resource) is element_type for resource in resources):
        return element_type
    return None


def _model_name(resource_type: type) -> Optional[ModelName]:
    model_name: Any = getattr(resource_type, "model_name", None)
    if isinstance(model_name, ModelName):
        return model_name
    if isinstance(model_name, str) and model_name:
        return ModelName(model_name, model_name + "s")
    return None

"""Virtual attribute support for presentations.

A presenter may declare *lets*: attributes that are not members of the
resource but are computed from it (and from the presentation context). The
:class:`LetsProxy` wraps a resource for the duration of a single
presentation so that handlers can read lets and real resource attributes
in exactly the same way.

Each let is computed on first access and memoised, so a let referenced by
several properties, links, embeds or other lets runs its handler once per
presentation.
"""

import operator
from collections.abc import Mapping
from typing import Any

from halpresenter.domain import Handler, LetSpec

__all__ = ["LetsProxy", "read_attribute", "attribute_reader"]


class LetsProxy:
    """Resolves virtual attributes on top of a wrapped resource.

    Attributes that are not declared lets are forwarded to the resource
    unchanged, including the exception raised for an unknown attribute.
    Special methods and ``__class__`` are forwarded too, so the proxy prints,
    compares, iterates and type-checks as the resource does.

    Example:
        >>> lets = {"full_name": LetSpec(lambda user, ctx: f"{user.first} {user.last}")}
        >>> proxy = LetsProxy(SimpleNamespace(first="John", last="Doe"), None, lets)
        >>> proxy.full_name
        'John Doe'
    """

    __slots__ = ("_resource", "_context", "_lets", "_memoized")

    def __init__(self, resource: Any, context: Any, lets: Mapping[str, LetSpec]):
        self._resource = resource
        self._context = context
        self._lets = lets
        self._memoized: dict[str, Any] = {}

    def bind_context(self, context: Any):
        """Set the context passed to let handlers.

        Used when the context defaults to the proxy itself, which only exists
        once the proxy has been built.
        """
        self._context = context

    def resolve(self, name: str) -> Any:
        """Return the value of a let or, failing that, of a resource attribute.

        Args:
            name: The attribute name.

        Returns:
            The memoised let value, or the resource's own attribute.
        """
        if name not in self._lets:
            return read_attribute(self._resource, name)
        if name not in self._memoized:
            self._memoized[name] = self._lets[name].handler(self, self._context)
        return self._memoized[name]

    def __getattr__(self, name: str) -> Any:
        if name in LetsProxy.__slots__:
            raise AttributeError(name)
        if name in self._lets:
            return self.resolve(name)
        return getattr(self._resource, name)

    def __getitem__(self, name: str) -> Any:
        if name in self._lets:
            return self.resolve(name)
        return self._resource[name]

    # Special methods bypass __getattr__, so each one the resource may
    # implement is forwarded explicitly.

    @property
    def __class__(self):
        return type(self._resource)

    def __str__(self):
        return str(self._resource)

    def __repr__(self):
        return repr(self._resource)

    def __format__(self, format_spec: str) -> str:
        return format(self._resource, format_spec)

    def __bool__(self):
        return bool(self._resource)

    def __len__(self):
        return len(self._resource)

    def __iter__(self):
        return iter(self._resource)

    def __reversed__(self):
        return reversed(self._resource)

    def __contains__(self, item: Any) -> bool:
        return item in self._resource

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._resource(*args, **kwargs)

    def __eq__(self, other: Any) -> bool:
        return self._resource == other

    def __ne__(self, other: Any) -> bool:
        return self._resource != other

    def __lt__(self, other: Any) -> bool:
        return self._resource < other

    def __le__(self, other: Any) -> bool:
        return self._resource <= other

    def __gt__(self, other: Any) -> bool:
        return self._resource > other

    def __ge__(self, other: Any) -> bool:
        return self._resource >= other

    def __hash__(self):
        return hash(self._resource)

    def __int__(self):
        return int(self._resource)

    def __float__(self):
        return float(self._resource)

    def __index__(self):
        return operator.index(self._resource)


def read_attribute(target: Any, name: str) -> Any:
    """Read a named attribute off a resource, proxy or mapping.

    Mappings are read by key, everything else by attribute. Missing names
    raise the underlying ``KeyError`` or ``AttributeError``.
    """
    if isinstance(target, LetsProxy):
        return target.resolve(name)
    if isinstance(target, Mapping):
        return target[name]
    return getattr(target, name)


def attribute_reader(name: str) -> Handler:
    """Build a handler that reads ``name`` off the resolution target."""

    def read(resource: Any, _context: Any) -> Any:
        return read_attribute(resource, name)

    read.__name__ = f"read_{name}"
    return read

"""Class-body declarations for presenter schemas.

Markers assigned in a presenter's class body are collected, in order, when
the class is created. The attribute name becomes the field name (or link
relation) unless one is given explicitly, and every marker may decorate a
``(resource, context)`` function to supply its handler:

    >>> class UserPresenter(Presenter):
    ...     name = Property()
    ...     email = Property(ignore_nil=True)
    ...     todos = Embed(with_=TodoPresenter)
    ...
    ...     @Link("self")
    ...     def self_link(user, context):
    ...         return f"/users/{user.id}"
    ...
    ...     @Let()
    ...     def full_name(user, context):
    ...         return f"{user.first_name} {user.last_name}"
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from halpresenter.domain import Handler
from halpresenter.errors import ConfigurationError

__all__ = ["Declaration", "Property", "Link", "Embed", "Let"]


class Declaration(ABC):
    """Base class for schema markers."""

    def __init__(self, handler: Optional[Handler] = None, name: Optional[str] = None):
        self.handler = handler
        self.name = name

    def __call__(self, handler: Handler) -> "Declaration":
        self.handler = handler
        return self

    @abstractmethod
    def declare(self, presenter_type: type, attribute_name: str):
        """Add this declaration to a presenter's definition.

        Args:
            presenter_type: The presenter class being created.
            attribute_name: The class attribute the marker was assigned to.
        """
        pass


class Property(Declaration):
    def __init__(self, handler: Optional[Handler] = None, *, with_: Optional[type] = None,
                 ignore_nil: bool = False, name: Optional[str] = None):
        super().__init__(handler, name)
        self.with_ = with_
        self.ignore_nil = ignore_nil

    def declare(self, presenter_type, attribute_name):
        presenter_type.property(
            self.name or attribute_name, self.handler,
            with_=self.with_, ignore_nil=self.ignore_nil,
        )


class Link(Declaration):
    """A link; extra keyword arguments become literal link attributes."""

    def __init__(self, rel: Optional[str] = None, handler: Optional[Handler] = None, *,
                 ignore_nil: bool = False, **attributes: Any):
        super().__init__(handler, rel)
        self.ignore_nil = ignore_nil
        self.attributes = attributes

    def declare(self, presenter_type, attribute_name):
        rel = self.name or attribute_name
        if self.handler is None:
            raise ConfigurationError(f"Link {rel!r} on {presenter_type.__name__} has no handler")
        presenter_type.link(rel, self.handler, ignore_nil=self.ignore_nil, **self.attributes)


class Embed(Declaration):
    def __init__(self, handler: Optional[Handler] = None, *, with_: Optional[type] = None,
                 ignore_nil: bool = False, name: Optional[str] = None):
        super().__init__(handler, name)
        self.with_ = with_
        self.ignore_nil = ignore_nil

    def declare(self, presenter_type, attribute_name):
        presenter_type.embed(
            self.name or attribute_name, self.handler,
            with_=self.with_, ignore_nil=self.ignore_nil,
        )


class Let(Declaration):
    def declare(self, presenter_type, attribute_name):
        name = self.name or attribute_name
        if self.handler is None:
            raise ConfigurationError(f"Let {name!r} on {presenter_type.__name__} has no handler")
        presenter_type.let(name, self.handler)

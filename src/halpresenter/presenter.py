"""Presenters and the resource dispatcher.

A presenter subclass declares a schema; presenting a resource resolves the
schema against it and produces a HAL-style nested dictionary:

    >>> class TodoPresenter(Presenter):
    ...     description = Property()
    >>> class UserPresenter(Presenter):
    ...     name = Property()
    ...     todos = Embed(with_=TodoPresenter)
    >>> UserPresenter.link("self", lambda user, context: f"/users/{user.id}")
    >>> UserPresenter.present(user)
    {'name': 'Stephen',
     '_links': {'self': {'href': '/users/1'}},
     '_embedded': {'todos': [{'description': 'Buy milk'}]}}

The result is plain data; encoding it is left to the caller (see
:mod:`halpresenter.encoding`).
"""

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, Optional

from halpresenter import encoding
from halpresenter.declarations import Declaration
from halpresenter.definition import PresenterDefinition
from halpresenter.domain import OMIT, EmbedSpec, Handler, LetSpec, LinkSpec, PropertySpec
from halpresenter.errors import ConfigurationError
from halpresenter.naming import ModelNameDeriver, NameDeriver, sequence_element_type
from halpresenter.proxy import LetsProxy, attribute_reader, read_attribute
from halpresenter.registry import PresenterRegistry, default_registry

__all__ = ["Presenter", "present"]

logger = logging.getLogger(__name__)

_UNSET = object()


class Presenter:
    """Base class for presenters, and the fallback dispatcher.

    Subclassing takes a snapshot of the parent's schema; the subclass's own
    declarations then extend or shadow it. Class keywords:

    * ``presents`` - register the new presenter as the default for a
      resource type.
    * ``registry`` - use an isolated :class:`PresenterRegistry` for this
      presenter and its subclasses.

    Attributes:
        definition: The presenter type's schema.
        registry: Registry consulted when dispatching without ``with_``.
        name_deriver: Derives default root keys from resource types.
        resource_type: The resource type this presenter was registered for.
        resource: The resource bound to this presenter instance.
        defaults: Options merged under the options given to :meth:`to_document`.
    """

    definition: ClassVar[PresenterDefinition] = PresenterDefinition()
    registry: ClassVar[PresenterRegistry] = default_registry
    name_deriver: ClassVar[NameDeriver] = ModelNameDeriver()
    resource_type: ClassVar[Optional[type]] = None

    def __init_subclass__(cls, presents: Optional[type] = None,
                          registry: Optional[PresenterRegistry] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.definition = PresenterDefinition.inherit_from(cls.definition)
        cls.resource_type = None
        if registry is not None:
            cls.registry = registry

        for attribute_name, value in list(vars(cls).items()):
            if isinstance(value, Declaration):
                delattr(cls, attribute_name)
                value.declare(cls, attribute_name)

        if presents is not None:
            cls.presents_type(presents)

    def __init__(self, resource: Any, **defaults: Any):
        self.resource = resource
        self.defaults = defaults

    @classmethod
    def present(cls, resource: Any, **options: Any) -> Any:
        """Present a resource, a sequence of resources, or a presenter instance.

        Args:
            resource: The object to present.
            **options: ``root`` overrides the derived root key (None disables
                wrapping); ``with_`` names the presenter to use; ``context`` is
                passed to every handler. Other options are passed through.

        Returns:
            The presented document, wrapped under a root key when one is
            given or can be derived.
        """
        if isinstance(resource, Presenter):
            return resource.to_document(**options)

        if resource is None:
            return None

        if _is_sequence(resource):
            member_options = {**options, "root": None}
            presented = [cls.present(member, **member_options) for member in resource]
            return _wrap(presented, options.get("root", _UNSET), lambda: cls._collection_name(resource))

        presenter_type = options.pop("with_", None) or cls.registry.resolve(type(resource)) or cls
        if presenter_type is Presenter:
            return resource

        logger.debug("Presenting %s with %s", type(resource).__name__, presenter_type.__name__)
        presented = presenter_type(resource).to_document(**{**options, "root": None})
        return _wrap(presented, options.get("root", _UNSET),
                     lambda: presenter_type.name_deriver.singular_name(type(resource)))

    def to_document(self, **options: Any) -> Any:
        """Resolve this presenter's schema against its resource.

        Args:
            **options: Merged over the instance defaults. ``context`` is passed
                to every handler and to nested presenters; when absent each
                handler receives the resource (or its lets proxy) instead.
                ``root`` behaves as in :meth:`present`.

        Returns:
            The document: properties, then ``_links`` and ``_embedded`` when
            any link or embed resolved.
        """
        options = {**self.defaults, **options}
        definition = type(self).definition

        context = options.pop("context", _UNSET)
        nested_options = {} if context is _UNSET else {"context": context}

        target = self.resource
        if definition.lets:
            target = LetsProxy(self.resource, context, definition.lets)
            if context is _UNSET:
                target.bind_context(target)
        if context is _UNSET:
            context = target

        document = {}
        for name, spec in definition.properties.items():
            if spec.handler is None:
                value = read_attribute(target, name)
            else:
                value = spec.handler(target, context)
            value = _present_field(value, spec.presenter, spec.ignore_nil, nested_options)
            if value is not OMIT:
                document[name] = value

        links = {}
        for rel, spec in definition.links.items():
            href = _present_field(spec.handler(target, context), None, spec.ignore_nil, nested_options)
            if href is not OMIT:
                links[rel] = {"href": href, **spec.attributes}
        if links:
            document["_links"] = links

        embedded = {}
        for name, spec in definition.embeds.items():
            value = _present_field(spec.handler(target, context), spec.presenter, spec.ignore_nil,
                                   nested_options)
            if value is not OMIT:
                embedded[name] = value
        if embedded:
            document["_embedded"] = embedded

        return _wrap(document, options.get("root", _UNSET),
                     lambda: type(self).name_deriver.singular_name(type(self.resource)))

    def as_json(self, **options: Any) -> Any:
        """Return the document converted to JSON-compatible values."""
        return encoding.jsonable(self.to_document(**options))

    def to_json(self, **options: Any) -> str:
        """Return the document encoded as a compact JSON string."""
        return encoding.to_json(self.to_document(**options))

    def __repr__(self):
        return f"{type(self).__name__}({self.resource!r})"

    @classmethod
    def _collection_name(cls, resources: Sequence) -> Optional[str]:
        element_type = sequence_element_type(resources)
        if element_type is None:
            return None
        return cls.name_deriver.plural_name(element_type)

    @classmethod
    def presents_type(cls, resource_type: type):
        """Register this presenter as the default for ``resource_type``."""
        cls.registry.register_default(resource_type, cls)
        cls.resource_type = resource_type

    @classmethod
    def let(cls, name: str, handler: Optional[Handler] = None):
        """Declare a virtual attribute, computed once per presentation.

        Lets are visible to every handler (including other lets) through the
        resource argument, as if they were attributes of the resource. Without
        a handler, returns a decorator.
        """
        if handler is None:
            def decorator(func: Handler) -> Handler:
                cls.let(name, func)
                return func

            return decorator

        cls.definition.declare_let(name, LetSpec(handler))
        return handler

    @classmethod
    def embed(cls, name: str, handler: Optional[Handler] = None, *,
              with_: Optional[type] = None, ignore_nil: bool = False):
        """Declare an embedded resource, rendered under ``_embedded``.

        Args:
            name: The embedded resource's name.
            handler: Computes the embedded value. Defaults to reading the
                same-named attribute.
            with_: Presenter for a non-nil value.
            ignore_nil: Leave the embed out when its value is None.

        Raises:
            ConfigurationError: If neither ``handler`` nor ``with_`` is given.
        """
        if handler is None:
            if with_ is None:
                raise ConfigurationError(
                    f"Embed {name!r} on {cls.__name__} needs a handler or a with_ presenter"
                )
            handler = attribute_reader(name)

        cls.definition.declare_embed(name, EmbedSpec(handler, with_, ignore_nil))

    @classmethod
    def link(cls, rel: str = "self", handler: Optional[Handler] = None, *,
             ignore_nil: bool = False, **attributes: Any):
        """Declare a link, rendered under ``_links``.

        The handler's return value becomes the link's ``href``; any further
        keyword arguments (``templated=True``, ``title=...``) are copied into
        the link as-is. Without a handler, returns a decorator.
        """
        if handler is None:
            def decorator(func: Handler) -> Handler:
                cls.link(rel, func, ignore_nil=ignore_nil, **attributes)
                return func

            return decorator

        cls.definition.declare_link(rel, LinkSpec(handler, attributes, ignore_nil))
        return handler

    @classmethod
    def property(cls, name: str, handler: Optional[Handler] = None, *,
                 with_: Optional[type] = None, ignore_nil: bool = False):
        """Declare a property.

        Args:
            name: The property's name in the document.
            handler: Computes the value. Defaults to reading the same-named
                attribute of the resource.
            with_: Presenter for a non-nil value, for nesting a resource as
                a property rather than under ``_embedded``.
            ignore_nil: Leave the property out when its value is None.
        """
        cls.definition.declare_property(name, PropertySpec(handler, with_, ignore_nil))
        return handler


def present(resource: Any, **options: Any) -> Any:
    """Present a resource with its registered presenter.

    Shorthand for :meth:`Presenter.present`.
    """
    return Presenter.present(resource, **options)


def _present_field(value: Any, presenter: Optional[type], ignore_nil: bool,
                   nested_options: dict[str, Any]) -> Any:
    if value is OMIT or (value is None and ignore_nil):
        return OMIT
    if presenter is not None and value is not None:
        return presenter.present(value, with_=presenter, root=None, **nested_options)
    return value


def _wrap(document: Any, root: Any, derive_root) -> Any:
    if root is _UNSET:
        root = derive_root()
    return {root: document} if root else document


def _is_sequence(resource: Any) -> bool:
    if isinstance(resource, (str, bytes, bytearray)):
        return False
    # namedtuples are records, not collections
    if isinstance(resource, tuple) and hasattr(resource, "_fields"):
        return False
    return isinstance(resource, Sequence)

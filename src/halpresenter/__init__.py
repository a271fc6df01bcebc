"""HAL-style presenters for arbitrary Python objects.

halpresenter turns domain objects into nested dictionaries of properties,
links (``_links``) and embedded resources (``_embedded``), ready to be
encoded as JSON. Presenters declare their schema on the class; the
schema is resolved against a live resource each time it is presented.

Key Features:
    - Declarative properties, links, embeds and virtual attributes (lets)
    - Schema inheritance by snapshot when a presenter is subclassed
    - Lets computed at most once per presentation
    - Default presenters per resource type, found along the type's MRO
    - Uniform handling of single resources and sequences, with derived
      root keys

Basic Usage:
    >>> from halpresenter import Link, Presenter, Property, named, present
    >>>
    >>> @named()
    ... class User:
    ...     def __init__(self, id, name):
    ...         self.id, self.name = id, name
    >>>
    >>> class UserPresenter(Presenter, presents=User):
    ...     name = Property()
    ...
    ...     @Link("self")
    ...     def self_link(user, context):
    ...         return f"/users/{user.id}"
    >>>
    >>> present(User(1, "Stephen"))
    {'user': {'name': 'Stephen', '_links': {'self': {'href': '/users/1'}}}}

The package consists of several modules:
    - presenter: The Presenter base class and the resource dispatcher
    - declarations: Class-body schema markers
    - definition: Per-presenter schema storage and inheritance
    - proxy: Memoising proxy for virtual attributes
    - registry: Default presenters by resource type
    - naming: Root key derivation
    - encoding: JSON conversion of presented documents
    - errors: Framework-specific exceptions
"""

from halpresenter.declarations import Embed, Let, Link, Property
from halpresenter.domain import OMIT
from halpresenter.errors import ConfigurationError
from halpresenter.naming import ModelName, named
from halpresenter.presenter import Presenter, present
from halpresenter.registry import PresenterRegistry, default_registry

__all__ = [
    "ConfigurationError",
    "Embed",
    "Let",
    "Link",
    "ModelName",
    "OMIT",
    "Presenter",
    "PresenterRegistry",
    "Property",
    "default_registry",
    "named",
    "present",
]

"""Registration of default presenters for resource types."""

import logging
import threading
from typing import Optional

__all__ = ["PresenterRegistry", "default_registry"]

logger = logging.getLogger(__name__)


class PresenterRegistry:
    """Maps resource types to the presenter used when none is given explicitly.

    Lookups fall back along the resource type's MRO, so an unregistered
    subclass is presented with its nearest registered ancestor's presenter.
    Ancestor hits are cached against the original type; the cache is
    cleared whenever a registration changes.

    Registrations are expected during application setup. After that the
    registry is safe to read from multiple threads: the only steady-state
    write is the cache fill, which stores the same value whichever thread
    wins.

    Example:
        >>> registry = PresenterRegistry()
        >>> registry.register_default(User, UserPresenter)
        >>> registry.resolve(AdminUser)  # AdminUser subclasses User
        <class 'UserPresenter'>
    """

    def __init__(self):
        self._defaults: dict[type, type] = {}
        self._resolved: dict[type, type] = {}
        self._lock = threading.Lock()

    def register_default(self, resource_type: type, presenter_type: type):
        """Register the default presenter for a resource type.

        Registering a type again replaces its previous presenter.

        Args:
            resource_type: The resource class.
            presenter_type: The presenter class used to present its instances.
        """
        with self._lock:
            self._defaults[resource_type] = presenter_type
            self._resolved.clear()
        logger.debug("Registered %s as default presenter for %s",
                     presenter_type.__name__, resource_type.__name__)

    def resolve(self, resource_type: type) -> Optional[type]:
        """Find the presenter for a resource type.

        Args:
            resource_type: The runtime type of the resource being presented.

        Returns:
            The registered presenter for the type or its nearest registered
            ancestor, or None if no ancestor is registered.
        """
        presenter_type = self._defaults.get(resource_type)
        if presenter_type is not None:
            return presenter_type

        presenter_type = self._resolved.get(resource_type)
        if presenter_type is not None:
            return presenter_type

        for ancestor in _ancestors(resource_type):
            presenter_type = self._defaults.get(ancestor)
            if presenter_type is not None:
                logger.debug("Resolved presenter %s for %s via ancestor %s",
                             presenter_type.__name__, resource_type.__name__, ancestor.__name__)
                with self._lock:
                    self._resolved[resource_type] = presenter_type
                return presenter_type

        return None

    def registered_types(self) -> list[type]:
        """Return the resource types with an explicit registration."""
        return list(self._defaults)


def _ancestors(resource_type: type) -> tuple[type, ...]:
    mro = getattr(resource_type, "__mro__", None)
    return mro[1:] if mro else ()


default_registry = PresenterRegistry()

from __future__ import annotations

"""Component lifecycle and the base class for item-processing stages.

Every component moves through these states, held in a single field:

UNCONFIGURED -> CONFIGURED -> INITIALIZED -> DESTROYED

Configuration is only accepted before ``initialize()``; once initialized a
component's settings are frozen, so one instance may be executed from
several threads as long as each call receives its own items.
"""

import logging
import threading
from enum import Enum
from typing import Any, MutableSequence, Optional

from mda_toolkit.core.exceptions import (
    ComponentInitializationError,
    DestroyedComponentError,
    MdaError,
    StageProcessingError,
    UninitializedComponentError,
    UnmodifiableComponentError,
)
from mda_toolkit.core.models import DOMElementItem

logger = logging.getLogger(__name__)

__all__ = ["ComponentState", "BaseComponent", "BaseStage", "require"]


class ComponentState(Enum):
    """Component lifecycle states."""

    UNCONFIGURED = "unconfigured"  # Constructed, nothing set yet
    CONFIGURED = "configured"      # At least one setting applied
    INITIALIZED = "initialized"    # Validated and ready for use
    DESTROYED = "destroyed"        # References released, unusable


class BaseComponent:
    """Base class providing lifecycle guards for configurable components.

    Subclasses expose their settings as properties whose setters call
    :meth:`_check_modifiable` and then :meth:`_mark_configured`, and override
    :meth:`do_initialize` / :meth:`do_destroy` as needed.
    """

    def __init__(self, component_id: Optional[str] = None) -> None:
        self._id = component_id
        self._state = ComponentState.UNCONFIGURED
        self._state_lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Public Properties
    # -------------------------------------------------------------------------

    @property
    def id(self) -> Optional[str]:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._check_modifiable()
        self._id = value
        self._mark_configured()

    @property
    def state(self) -> ComponentState:
        """Current lifecycle state."""
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is ComponentState.INITIALIZED

    @property
    def destroyed(self) -> bool:
        return self._state is ComponentState.DESTROYED

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def configure(self, **options: Any) -> "BaseComponent":
        """Apply several settings by property name; returns *self*."""
        for name, value in options.items():
            attr = getattr(type(self), name, None)
            if not isinstance(attr, property) or attr.fset is None:
                raise ComponentInitializationError(
                    f"unknown setting '{name}' for {type(self).__name__}", self._id)
            setattr(self, name, value)
        return self

    def initialize(self) -> None:
        """Validate configuration and build internal structures.

        Calling this on an initialized component has no effect.

        Raises:
            DestroyedComponentError: if the component has been destroyed
            ComponentInitializationError: if required settings are missing
        """
        with self._state_lock:
            if self._state is ComponentState.DESTROYED:
                raise DestroyedComponentError(
                    "component has been destroyed", self._id, self._state.value)
            if self._state is ComponentState.INITIALIZED:
                return
            self.do_initialize()
            self._state = ComponentState.INITIALIZED
        logger.debug("Initialized %s id=%s", type(self).__name__, self._id)

    def destroy(self) -> None:
        """Release references; any later use fails.  Safe to call twice."""
        with self._state_lock:
            if self._state is ComponentState.DESTROYED:
                return
            self.do_destroy()
            self._state = ComponentState.DESTROYED
        logger.debug("Destroyed %s id=%s", type(self).__name__, self._id)

    def do_initialize(self) -> None:
        """Hook for subclasses; raise ComponentInitializationError on bad config."""

    def do_destroy(self) -> None:
        """Hook for subclasses; must not raise."""

    # -------------------------------------------------------------------------
    # Guards
    # -------------------------------------------------------------------------

    def _check_not_destroyed(self) -> None:
        if self._state is ComponentState.DESTROYED:
            raise DestroyedComponentError(
                "component has been destroyed", self._id, self._state.value)

    def _check_modifiable(self) -> None:
        self._check_not_destroyed()
        if self._state is ComponentState.INITIALIZED:
            raise UnmodifiableComponentError(
                "component is initialized and can not be modified", self._id, self._state.value)

    def _check_initialized(self) -> None:
        self._check_not_destroyed()
        if self._state is not ComponentState.INITIALIZED:
            raise UninitializedComponentError(
                "component has not been initialized", self._id, self._state.value)

    def _mark_configured(self) -> None:
        if self._state is ComponentState.UNCONFIGURED:
            self._state = ComponentState.CONFIGURED


class BaseStage(BaseComponent):
    """A component that processes a collection of items in place.

    Items are processed sequentially in collection order.  Subclasses
    implement :meth:`do_execute`.
    """

    def do_initialize(self) -> None:
        super().do_initialize()
        if not self._id:
            raise ComponentInitializationError("stage id may not be null or empty")

    def execute(self, items: MutableSequence[DOMElementItem]) -> None:
        """Run the stage over *items*.

        Raises:
            StageProcessingError: if the stage can not process the collection
        """
        self._check_initialized()
        logger.debug("Stage %s: processing %d item(s)", self._id, len(items))
        try:
            self.do_execute(items)
        except MdaError:
            raise
        except Exception as exc:
            raise StageProcessingError(
                f"unexpected failure in {type(self).__name__}: {exc}", self._id, exc) from exc
        logger.debug("Stage %s: done", self._id)

    def do_execute(self, items: MutableSequence[DOMElementItem]) -> None:
        raise NotImplementedError


def require(value: Any, message: str, component_id: Optional[str] = None) -> Any:
    """Return *value*, or raise ComponentInitializationError if it is None."""
    if value is None:
        raise ComponentInitializationError(message, component_id)
    return value


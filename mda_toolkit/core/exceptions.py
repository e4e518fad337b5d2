from __future__ import annotations

"""Exception classes raised by processing components.

Configuration and lifecycle errors are raised eagerly at the call site.
Problems found in the metadata itself are not exceptions: visitors record
them as :class:`~mda_toolkit.core.models.ErrorStatus` on the item.
Output sink failures are left as the builtin :class:`OSError`.
"""

from typing import Optional


class MdaError(Exception):
    """Base exception for all component errors."""

    def __init__(self, message: str, component_id: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.component_id = component_id
        self.cause = cause

    def __str__(self) -> str:
        if self.component_id:
            return f"[Component: {self.component_id}] {super().__str__()}"
        return super().__str__()


class ComponentInitializationError(MdaError):
    """Raised by ``initialize()`` when required configuration is missing or invalid."""
    pass


class ComponentStateError(MdaError):
    """Raised when an operation is not allowed in the component's current state."""

    def __init__(self, message: str, component_id: Optional[str] = None,
                 current_state: Optional[str] = None) -> None:
        super().__init__(message, component_id)
        self.current_state = current_state


class DestroyedComponentError(ComponentStateError):
    """Raised on any use of a component after ``destroy()``."""
    pass


class UnmodifiableComponentError(ComponentStateError):
    """Raised when configuration is changed after ``initialize()``."""
    pass


class UninitializedComponentError(ComponentStateError):
    """Raised when a component is used before ``initialize()``."""
    pass


class StageProcessingError(MdaError):
    """Raised when a stage cannot complete its pass over a collection."""
    pass

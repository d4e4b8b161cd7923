"""Events that belong to a window, and the global lifecycle events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Hashable, Optional, Tuple, Union

from .events import (
    AxisId,
    DeviceEvent,
    DeviceId,
    ElementState,
    KeyboardInput,
    ModifiersState,
    MouseButton,
    MouseButtonState,
    MouseScrollDelta,
    Theme,
    Touch,
    TouchPhase,
)

WindowId = Hashable


class WindowEvent:
    """Base class of all events that belong to a single window.

    Every window event carries the ``window_id`` of its window.
    """

    __slots__ = ()

    window_id: WindowId


@dataclass(frozen=True)
class WindowRedrawRequestedEvent(WindowEvent):
    """A redraw was requested by the OS or application code."""

    window_id: WindowId


@dataclass(frozen=True)
class WindowResizedEvent(WindowEvent):
    """A window was resized; ``size`` is in physical pixels."""

    window_id: WindowId
    size: Tuple[int, int]

    def __post_init__(self) -> None:
        width, height = self.size
        if width < 0 or height < 0:
            raise ValueError(f"window size must not be negative: {self.size!r}")
        object.__setattr__(self, "size", (width, height))


@dataclass(frozen=True)
class WindowMovedEvent(WindowEvent):
    """A window was moved; ``position`` is in physical pixels."""

    window_id: WindowId
    position: Tuple[int, int]


@dataclass(frozen=True)
class WindowCloseRequestedEvent(WindowEvent):
    """A window was closed."""

    window_id: WindowId


@dataclass(frozen=True)
class WindowDestroyedEvent(WindowEvent):
    """A window was destroyed."""

    window_id: WindowId


@dataclass(frozen=True)
class WindowDroppedFileEvent(WindowEvent):
    """A file was dropped on a window."""

    window_id: WindowId
    file: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "file", Path(self.file))


@dataclass(frozen=True)
class WindowHoveredFileEvent(WindowEvent):
    """A file is being hovered over a window."""

    window_id: WindowId
    file: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "file", Path(self.file))


@dataclass(frozen=True)
class WindowHoveredFileCancelledEvent(WindowEvent):
    """A file that was hovered over a window was taken away."""

    window_id: WindowId


@dataclass(frozen=True)
class WindowFocusGainedEvent(WindowEvent):
    """A window gained input focus."""

    window_id: WindowId


@dataclass(frozen=True)
class WindowFocusLostEvent(WindowEvent):
    """A window lost input focus."""

    window_id: WindowId


@dataclass(frozen=True)
class WindowKeyboardInputEvent(WindowEvent):
    """A window received keyboard input.

    ``is_synthetic`` marks events generated to report keyboard state changes
    that happened while the window had no focus.
    """

    window_id: WindowId
    device_id: DeviceId
    input: KeyboardInput
    is_synthetic: bool


@dataclass(frozen=True)
class WindowTextInputEvent(WindowEvent):
    """A window received text input of a single code point."""

    window_id: WindowId
    character: str

    def __post_init__(self) -> None:
        if not isinstance(self.character, str) or len(self.character) != 1:
            raise ValueError(f"character must be a single character, got {self.character!r}")


@dataclass(frozen=True)
class WindowMouseEnterEvent(WindowEvent):
    """The mouse cursor entered the window area."""

    window_id: WindowId
    device_id: DeviceId
    buttons: MouseButtonState


@dataclass(frozen=True)
class WindowMouseLeaveEvent(WindowEvent):
    """The mouse cursor left the window area."""

    window_id: WindowId
    device_id: DeviceId
    buttons: MouseButtonState


@dataclass(frozen=True)
class WindowMouseMoveEvent(WindowEvent):
    """The mouse cursor moved; positions are relative to the window's top-left corner."""

    window_id: WindowId
    device_id: DeviceId
    position: Tuple[float, float]
    prev_position: Tuple[float, float]
    buttons: MouseButtonState
    modifiers: ModifiersState


@dataclass(frozen=True)
class WindowMouseButtonEvent(WindowEvent):
    """A mouse button was pressed or released on a window."""

    window_id: WindowId
    device_id: DeviceId
    button: MouseButton
    state: ElementState
    position: Tuple[float, float]
    prev_position: Tuple[float, float]
    buttons: MouseButtonState
    modifiers: ModifiersState


@dataclass(frozen=True)
class WindowMouseWheelEvent(WindowEvent):
    """A window received mouse wheel input."""

    window_id: WindowId
    device_id: DeviceId
    delta: MouseScrollDelta
    phase: TouchPhase
    position: Optional[Tuple[float, float]]
    buttons: MouseButtonState
    modifiers: ModifiersState


@dataclass(frozen=True)
class WindowAxisMotionEvent(WindowEvent):
    """A window received axis motion input."""

    window_id: WindowId
    device_id: DeviceId
    axis: AxisId
    value: float


@dataclass(frozen=True)
class WindowTouchpadPressureEvent(WindowEvent):
    """A window received touchpad pressure input; ``pressure`` is in 0 to 1."""

    window_id: WindowId
    device_id: DeviceId
    pressure: float
    stage: int


@dataclass(frozen=True)
class WindowTouchEvent(WindowEvent):
    """A window received touch input."""

    window_id: WindowId
    touch: Touch


@dataclass(frozen=True)
class WindowScaleFactorChangedEvent(WindowEvent):
    """The number of physical pixels per logical pixel changed."""

    window_id: WindowId
    scale_factor: float


@dataclass(frozen=True)
class WindowThemeChangedEvent(WindowEvent):
    """The theme of a window changed."""

    window_id: WindowId
    theme: Theme


class LifecycleEvent(Enum):
    """Global events that carry no data."""

    NEW_EVENTS = "new_events"
    """A new event-processing cycle starts."""

    SUSPENDED = "suspended"
    """The application has been suspended."""

    RESUMED = "resumed"
    """The application has been resumed."""

    MAIN_EVENTS_CLEARED = "main_events_cleared"
    """All input events were processed and redrawing is about to begin."""

    REDRAW_EVENTS_CLEARED = "redraw_events_cleared"
    """All open redraw requests were processed."""

    ALL_WINDOWS_CLOSED = "all_windows_closed"
    """All windows were closed; may happen again after a new window is opened."""


Event = Union[WindowEvent, DeviceEvent, LifecycleEvent]


def event_window_id(event: Event) -> Optional[WindowId]:
    """Return the window ID of a window event, or None for other global events."""
    if isinstance(event, WindowEvent):
        return event.window_id
    if isinstance(event, (DeviceEvent, LifecycleEvent)):
        return None
    raise TypeError(f"not an event: {event!r}")
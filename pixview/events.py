"""Input state types and raw device events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag, IntEnum, auto
from typing import Iterator, Optional, Set, Tuple, Union

DeviceId = int
AxisId = int
ButtonId = int
ScanCode = int

_MAX_OTHER_BUTTON = 0xFFFF


class ElementState(Enum):
    """State of a button or key."""

    PRESSED = "pressed"
    RELEASED = "released"

    def is_pressed(self) -> bool:
        """True if the button or key is pressed."""
        return self is ElementState.PRESSED

    def is_released(self) -> bool:
        """True if the button or key is released."""
        return self is ElementState.RELEASED


class Theme(Enum):
    """OS theme (light or dark)."""

    LIGHT = "light"
    DARK = "dark"

    def is_light(self) -> bool:
        """True for the light theme."""
        return self is Theme.LIGHT

    def is_dark(self) -> bool:
        """True for the dark theme."""
        return self is Theme.DARK


class _ButtonKind(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    OTHER = 3


@dataclass(frozen=True, order=True)
class MouseButton:
    """A mouse button.

    Buttons order as left, right, middle, then other buttons by index.
    """

    _kind: _ButtonKind
    index: int = 0

    def __post_init__(self) -> None:
        if self._kind is _ButtonKind.OTHER:
            if not isinstance(self.index, int) or not 0 <= self.index <= _MAX_OTHER_BUTTON:
                raise ValueError(
                    f"mouse button index must be in 0..={_MAX_OTHER_BUTTON}, got {self.index!r}"
                )
        elif self.index != 0:
            raise ValueError("only other buttons carry an index")

    @classmethod
    def left(cls) -> "MouseButton":
        """The left mouse button."""
        return cls(_ButtonKind.LEFT)

    @classmethod
    def right(cls) -> "MouseButton":
        """The right mouse button."""
        return cls(_ButtonKind.RIGHT)

    @classmethod
    def middle(cls) -> "MouseButton":
        """The middle mouse button."""
        return cls(_ButtonKind.MIDDLE)

    @classmethod
    def other(cls, index: int) -> "MouseButton":
        """Another mouse button identified by index."""
        return cls(_ButtonKind.OTHER, index)

    def is_left(self) -> bool:
        """True for the left mouse button."""
        return self._kind is _ButtonKind.LEFT

    def is_right(self) -> bool:
        """True for the right mouse button."""
        return self._kind is _ButtonKind.RIGHT

    def is_middle(self) -> bool:
        """True for the middle mouse button."""
        return self._kind is _ButtonKind.MIDDLE

    def is_other(self, index: int) -> bool:
        """True if this is the other button with the given index."""
        return self._kind is _ButtonKind.OTHER and self.index == index

    def __repr__(self) -> str:
        if self._kind is _ButtonKind.OTHER:
            return f"MouseButton.other({self.index})"
        return f"MouseButton.{self._kind.name.lower()}()"


@dataclass
class MouseButtonState:
    """The set of currently pressed mouse buttons."""

    _buttons: Set[MouseButton] = field(default_factory=set)

    def is_pressed(self, button: MouseButton) -> bool:
        """True if the button is pressed."""
        return button in self._buttons

    def iter_pressed(self) -> Iterator[MouseButton]:
        """Iterate over the pressed buttons in button order."""
        yield from sorted(self._buttons)

    def set_pressed(self, button: MouseButton, pressed: bool) -> None:
        """Mark a button as pressed or released."""
        if pressed:
            self._buttons.add(button)
        else:
            self._buttons.discard(button)


class ModifiersState(Flag):
    """Keyboard modifiers held down at the time of an event."""

    NONE = 0
    SHIFT = auto()
    CTRL = auto()
    ALT = auto()
    LOGO = auto()


class TouchPhase(Enum):
    """Phase of a touch or scroll gesture."""

    STARTED = "started"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class LineDelta:
    """Scroll amount in lines or rows."""

    x: float
    y: float


@dataclass(frozen=True)
class PixelDelta:
    """Scroll amount in pixels."""

    x: float
    y: float


MouseScrollDelta = Union[LineDelta, PixelDelta]


@dataclass(frozen=True)
class Touch:
    """A touch input."""

    device_id: DeviceId
    phase: TouchPhase
    location: Tuple[float, float]
    id: int
    force: Optional[float] = None


@dataclass(frozen=True)
class KeyboardInput:
    """Keyboard input.

    ``scan_code`` identifies the physical key, ``key_code`` its semantic
    meaning (a key name such as ``"Escape"``) if known.
    """

    scan_code: ScanCode
    key_code: Optional[str]
    state: ElementState
    modifiers: ModifiersState = ModifiersState.NONE


@dataclass
class EventHandlerControlFlow:
    """Lets an event handler remove itself or stop event propagation."""

    remove_handler: bool = False
    stop_propagation: bool = False


class DeviceEvent:
    """Base class of raw hardware events not tied to any window."""

    __slots__ = ()


@dataclass(frozen=True)
class DeviceAddedEvent(DeviceEvent):
    """A new device was added."""

    device_id: DeviceId


@dataclass(frozen=True)
class DeviceRemovedEvent(DeviceEvent):
    """A device was removed."""

    device_id: DeviceId


@dataclass(frozen=True)
class DeviceMouseMotionEvent(DeviceEvent):
    """Raw, unfiltered relative motion of a pointing device."""

    device_id: DeviceId
    delta: Tuple[float, float]


@dataclass(frozen=True)
class DeviceMouseWheelEvent(DeviceEvent):
    """The scroll wheel of a mouse was moved."""

    device_id: DeviceId
    delta: MouseScrollDelta


@dataclass(frozen=True)
class DeviceMotionEvent(DeviceEvent):
    """An analog axis of a device was moved."""

    device_id: DeviceId
    axis: AxisId
    value: float


@dataclass(frozen=True)
class DeviceButtonEvent(DeviceEvent):
    """A button on a device was pressed or released."""

    device_id: DeviceId
    button: ButtonId
    state: ElementState


@dataclass(frozen=True)
class DeviceKeyboardInputEvent(DeviceEvent):
    """A device generated keyboard input."""

    device_id: DeviceId
    input: KeyboardInput


@dataclass(frozen=True)
class DeviceTextInputEvent(DeviceEvent):
    """A device generated text input of a single code point."""

    device_id: DeviceId
    codepoint: str

    def __post_init__(self) -> None:
        if not isinstance(self.codepoint, str) or len(self.codepoint) != 1:
            raise ValueError(f"codepoint must be a single character, got {self.codepoint!r}")
# pixview

Building blocks for showing image data while debugging image processing code:
descriptions of pixel layouts, owned and borrowed image buffers, adapters for
Pillow images and numpy-compatible tensors, a one-shot channel for handing a
result from one thread to another, and typed keyboard, mouse, device and
window events.

## Installation

```
pip install pixview
```

To run the test suite:

```
pip install "pixview[test]"
pytest
```

## Describing image data (`pixview.image_info`)

`PixelFormat` lists the supported 8-bit formats: `MONO8`, `MONO_ALPHA8`,
`MONO_ALPHA8_PREMULTIPLIED`, `BGR8`, `BGRA8`, `BGRA8_PREMULTIPLIED`, `RGB8`,
`RGBA8` and `RGBA8_PREMULTIPLIED`. Each one reports `channels()`,
`bytes_per_pixel()` and `alpha()` (an `Alpha` member, or `None` for formats
without alpha).

`ImageInfo` is a frozen dataclass holding the `pixel_format`, the `size` as
`(width, height)` in pixels and the `stride` as `(x, y)` in bytes.
`ImageInfo.new(pixel_format, width, height)` and the shorthands
(`mono8`, `mono_alpha8`, `rgb8`, `bgra8_premultiplied`, ...) compute a tightly
packed stride. Negative sizes raise `ValueError`, non-integers `TypeError`.

```python
from pixview.image_info import Alpha, ImageInfo

info = ImageInfo.rgb8(1920, 1080)
info.stride                          # (3, 5760)
info.byte_size()                     # 6220800
ImageInfo.bgra8_premultiplied(640, 480).pixel_format.alpha()   # Alpha.PREMULTIPLIED
```

To use a different row stride, construct `ImageInfo(pixel_format, size, stride)`
directly; `byte_size()` uses the larger of the two strides.

## Images (`pixview.image`)

`ImageView(info, data)` pairs an `ImageInfo` with a bytes-like buffer without
copying it. `Image` owns image data in one of three ways:

* `Image(info, data)` or `Image.from_view(view)` keeps its own copy of the bytes;
* `Image.from_source(obj)` wraps any object with an `as_image_view()` method
  and asks it for a view each time one is needed;
* `Image.invalid(error)` carries an `ImageDataError` (or a message) that is
  raised by `as_image_view()`; `is_valid` is then `False`.

`Image.copy()` returns an independent image; a wrapped source is snapshotted
into owned bytes, or becomes an invalid image if the source raises
`ImageDataError`. `image_info(obj)` returns the `ImageInfo` of anything with
an `as_image_view()` method.

```python
from pixview.image import Image, ImageView, image_info
from pixview.image_info import ImageInfo

view = ImageView(ImageInfo.mono8(4, 2), bytes(8))
image = Image.from_view(view)
image_info(image) == ImageInfo.mono8(4, 2)     # True
```

## Pillow images (`pixview.pil_support`)

* `pixel_format_for_mode(mode)` maps the Pillow modes `L`, `LA`, `La`, `RGB`,
  `RGBA`, `RGBa` and `BGR;24` to a `PixelFormat` and raises `ImageDataError`
  for any other mode.
* `pil_image_info(image)` and `pil_image_view(image)` describe and view the raw
  bytes of a Pillow image.
* `image_from_pil(image)` returns an owned `Image`, or an invalid one if the
  mode is not supported.
* `save_rgba8_image(path, data, size, row_stride)` writes 8-bit RGBA data as a
  PNG file, dropping any padding at the end of each row. It raises
  `ValueError` if the stride is shorter than a row or the data is too short.

```python
from PIL import Image as PilImage
from pixview.pil_support import image_from_pil

image = image_from_pil(PilImage.new("RGB", (8, 4)))
image.as_image_view().info.size      # (8, 4)
```

## Tensors (`pixview.tensor`)

A tensor is anything `numpy.asarray` accepts. Its shape is read as
`(height, width)` for monochrome data, `(height, width, channels)` for
interlaced data or `(channels, height, width)` for planar data.

`as_image(tensor, pixel_format)` takes `Planar(fmt)`, `Interlaced(fmt)` or
`Guess(ColorFormat.RGB | ColorFormat.BGR)` and returns a `TensorImage`
(`tensor`, `info`, `planar`). Shorthands: `as_interlaced`, `as_planar`,
`as_image_guess`, `as_image_guess_rgb`, `as_image_guess_bgr`, `as_mono8`,
`as_interlaced_rgb8`, `as_interlaced_rgba8`, `as_interlaced_bgr8`,
`as_interlaced_bgra8`, `as_planar_rgb8`, `as_planar_rgba8`, `as_planar_bgr8`
and `as_planar_bgra8`. A shape that does not fit raises `ImageDataError`.

When guessing, a single channel (first or last axis) gives `MONO8`; 3 or 4
channels give RGB/RGBA or BGR/BGRA by the chosen colour format, with the last
axis checked before the first.

`TensorImage.to_image()` copies the data into an owned `Image`, casting it to
`uint8` and turning planar data into interlaced data. `image_from_result(x)`
accepts a `TensorImage` or an `ImageDataError` and returns an `Image` or an
invalid one.

```python
import numpy as np
from pixview.tensor import as_image_guess_rgb

wrapped = as_image_guess_rgb(np.zeros((3, 8, 5), dtype=np.uint8))
wrapped.planar        # True
wrapped.info.size     # (5, 8)
image = wrapped.to_image()
```

## One-shot channels (`pixview.oneshot`)

`channel()` returns a connected `Sender` and `Receiver` for a single value.

```python
from pixview.oneshot import channel

sender, receiver = channel()
sender.send(10)
receiver.recv()       # 10
```

* `Sender.send(value)` may be called once; a second call raises `RuntimeError`.
  `Sender.close()`, leaving a `with sender:` block, or garbage collection
  without sending disconnects the channel.
* `Receiver.recv()` blocks; `try_recv()` does not; `recv_timeout(timeout)`
  takes seconds or a `timedelta`; `recv_deadline(deadline)` takes a
  `time.monotonic()` instant.

All errors derive from `OneshotError`: `DisconnectedError` when the sender was
closed without a value, `AlreadyRetrievedError` when the value was already
taken, and `NotReadyError` when `try_recv`, `recv_timeout` or `recv_deadline`
find no value yet.

## Other helpers

* `pixview.rectangle.Rectangle` — a frozen, ordered rectangle; build it with
  `Rectangle.from_xywh(x, y, width, height)`. Negative sizes raise `ValueError`.
* `pixview.color.Color` — an RGBA colour with components from 0 to 1;
  `Color.rgb`, `Color.rgba`, `Color.black()` and `Color.white()`.
* `pixview.termination.report(result)` — returns 1 and prints
  `Error: ...` to standard error if `result` is an exception, 0 otherwise.

## Events

`pixview.events` defines the input state types `ElementState`, `Theme`,
`MouseButton` (`left()`, `right()`, `middle()`, `other(index)`),
`MouseButtonState`, `ModifiersState`, `TouchPhase`, `LineDelta`,
`PixelDelta`, `Touch`, `KeyboardInput` and `EventHandlerControlFlow`, and the
device events derived from `DeviceEvent` (`DeviceAddedEvent`,
`DeviceMouseMotionEvent`, `DeviceKeyboardInputEvent`, ...).

`pixview.window_events` defines the window events derived from `WindowEvent`
(`WindowResizedEvent`, `WindowKeyboardInputEvent`, `WindowMouseButtonEvent`,
`WindowThemeChangedEvent`, ...), each carrying a `window_id`, and the data-less
`LifecycleEvent` members. `event_window_id(event)` returns the window ID of a
window event, `None` for device and lifecycle events, and raises `TypeError`
for anything else.

```python
from pixview.events import MouseButton, MouseButtonState

state = MouseButtonState()
state.set_pressed(MouseButton.other(4), True)
state.set_pressed(MouseButton.left(), True)
list(state.iter_pressed())    # [MouseButton.left(), MouseButton.other(4)]
```

## What this package does not do

pixview does not open windows, run an event loop or draw anything on screen.
The event types are plain data for code that produces or consumes such
events; nothing in the package generates them or delivers them to handlers.
There is no command-line program.
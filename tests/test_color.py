from pixview.color import Color


def test_rgb_is_opaque():
    color = Color.rgb(0.25, 0.5, 0.75)
    assert color == Color.rgba(0.25, 0.5, 0.75, 1.0)
    assert color.alpha == 1.0


def test_rgba_keeps_components():
    color = Color.rgba(0.1, 0.2, 0.3, 0.4)
    assert (color.red, color.green, color.blue, color.alpha) == (0.1, 0.2, 0.3, 0.4)


def test_black_and_white():
    assert Color.black() == Color(0.0, 0.0, 0.0, 1.0)
    assert Color.white() == Color(1.0, 1.0, 1.0, 1.0)


def test_ordering():
    assert Color.black() < Color.white()
    assert Color.rgba(0.5, 0.5, 0.5, 0.0) < Color.rgb(0.5, 0.5, 0.5)
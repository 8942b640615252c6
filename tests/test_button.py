from mnistlab.button import BLACK, GREEN, LABEL_FONT_SIZE, WHITE, Button


class RecordingCanvas:
    def __init__(self):
        self.rects = []
        self.texts = []

    def rectangle(self, x, y, width, height, *, fill, outline=None, thickness=0.0):
        self.rects.append((x, y, width, height, fill, outline, thickness))

    def text(self, x, y, string, *, size, color, anchor="center"):
        self.texts.append((x, y, string, size, color, anchor))


def make_button():
    return Button(300.0, 520.0, 100.0, 40.0, "Add Layer")


def test_contains_inside_point():
    assert make_button().contains(350.0, 540.0)


def test_contains_rejects_outside_points():
    button = make_button()
    assert not button.contains(250.0, 540.0)
    assert not button.contains(350.0, 600.0)


def test_contains_includes_outline():
    button = make_button()
    assert button.contains(button.x - button.outline_thickness, button.y)
    assert not button.contains(button.x - button.outline_thickness - 0.5, button.y)


def test_default_colours():
    button = make_button()
    assert button.fill == WHITE
    assert button.outline == BLACK


def test_draw_uses_current_fill_and_centres_label():
    button = make_button()
    button.fill = GREEN
    canvas = RecordingCanvas()
    button.draw(canvas)
    assert canvas.rects == [(300.0, 520.0, 100.0, 40.0, GREEN, BLACK, 1.0)]
    assert len(canvas.texts) == 1
    x, y, string, size, color, anchor = canvas.texts[0]
    assert (x, y) == (button.x + button.width / 2, button.y + button.height / 2)
    assert string == "Add Layer"
    assert size == LABEL_FONT_SIZE
    assert color == BLACK
    assert anchor == "center"
from tedit.buffer import Viewport
from tedit.runtime.config import EditorSettings
from tedit.session import SessionSnapshot, StatusSummary, VisibleLine
from tedit.terminal import ScreenRenderer, move_cursor
from tedit.terminal.renderer import STATUS_COLORS


def make_snapshot(
    lines: tuple[str, ...] = ("hello", "world"),
    *,
    cursor: tuple[int, int] = (0, 0),
    height: int = 4,
    width: int = 20,
    prompt: str | None = None,
) -> SessionSnapshot:
    return SessionSnapshot(
        lines=tuple(
            VisibleLine(number=index + 1, text=text) for index, text in enumerate(lines)
        ),
        cursor=cursor,
        status=StatusSummary(
            display_name="a.txt",
            line_count=len(lines),
            modified=True,
            row=cursor[0] + 1,
            col=cursor[1] + 1,
        ),
        message=prompt if prompt is not None else "HELP",
        viewport=Viewport(height=height, width=width),
        prompt=prompt,
    )


def test_gutter_right_aligns_numbers() -> None:
    renderer = ScreenRenderer()

    assert renderer.gutter(7) == "   7 "
    assert renderer.gutter(1234) == "1234 "
    assert renderer.gutter(None) == "   ~ "


def test_render_draws_lines_and_filler_rows() -> None:
    frame = ScreenRenderer().render(make_snapshot())

    assert "   1 hello\r\n" in frame
    assert "   2 world\r\n" in frame
    assert frame.count("   ~ \r\n") == 2


def test_render_truncates_long_lines() -> None:
    frame = ScreenRenderer().render(make_snapshot(("abcdefghij",), width=4))

    assert "   1 abcd\r\n" in frame
    assert "abcde" not in frame


def test_render_status_bar_layout() -> None:
    frame = ScreenRenderer().render(make_snapshot(width=35))

    status = " a.txt - 2 lines (modified)" + " " * 9 + "1/1 "
    assert STATUS_COLORS + status in frame
    assert frame.rstrip().endswith("\x1b[?25h")


def test_render_places_cursor_after_gutter() -> None:
    frame = ScreenRenderer().render(make_snapshot(cursor=(1, 3)))

    assert move_cursor(1, 8) in frame


def test_render_places_cursor_in_prompt() -> None:
    frame = ScreenRenderer().render(make_snapshot(prompt="Save as: ab", height=3))

    assert "Save as: ab" in frame
    assert move_cursor(4, 11) in frame


def test_status_format_cuts_left_half_when_narrow() -> None:
    status = StatusSummary("long-name.txt", 3, False, 1, 1)

    assert status.format(12) == " long-na1/1 "


def test_status_format_never_exceeds_width() -> None:
    status = StatusSummary("a.txt", 300, False, 100, 200)

    assert status.format(5) == "100/2"
    assert status.format(0) == ""


def test_render_with_narrowest_gutter() -> None:
    settings = EditorSettings.from_env({"TEDIT_GUTTER": "0"})
    renderer = ScreenRenderer(gutter_width=settings.gutter_width)

    frame = renderer.render(make_snapshot(("hi",)))

    assert "1 hi\r\n" in frame
    assert renderer.gutter(None) == "~ "

from tedit.input.events import BACKSPACE, ENTER, ESC, UP, KeyInput
from tedit.session import FilenamePrompt


def feed_text(prompt: FilenamePrompt, text: str) -> None:
    for ch in text:
        prompt.feed(KeyInput.char(ch))


def test_prompt_accumulates_and_submits() -> None:
    prompt = FilenamePrompt()
    feed_text(prompt, "out.txt")

    outcome = prompt.feed(KeyInput(ENTER))

    assert outcome.status == "submit"
    assert outcome.finished
    assert outcome.value == "out.txt"
    assert prompt.display == "Save as: out.txt"


def test_prompt_backspace_removes_last_char() -> None:
    prompt = FilenamePrompt()
    feed_text(prompt, "ab")

    prompt.feed(KeyInput(BACKSPACE))
    prompt.feed(KeyInput(BACKSPACE))
    outcome = prompt.feed(KeyInput(BACKSPACE))

    assert outcome.status == "editing"
    assert prompt.text == ""


def test_prompt_enter_on_empty_is_ignored() -> None:
    prompt = FilenamePrompt()

    outcome = prompt.feed(KeyInput(ENTER))

    assert outcome.status == "ignored"
    assert not outcome.finished


def test_prompt_escape_cancels() -> None:
    prompt = FilenamePrompt("Name: ")
    feed_text(prompt, "x")

    outcome = prompt.feed(KeyInput(ESC))

    assert outcome.status == "cancel"
    assert outcome.value is None
    assert outcome.finished


def test_prompt_ignores_non_text_keys() -> None:
    prompt = FilenamePrompt()

    assert prompt.feed(KeyInput(UP)).status == "ignored"
    assert prompt.feed(KeyInput.ctrl("s")).status == "ignored"
    assert prompt.text == ""

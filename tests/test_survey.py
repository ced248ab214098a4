import io

from rich.console import Console

from prompter.__main__ import format_answers, run_survey
from prompter.input.stream_input import StreamInput
from prompter.prompter import Prompter
from prompter.ui.console import theme


def scripted(text: str) -> Prompter:
    console = Console(file=io.StringIO(), theme=theme, color_system=None, force_terminal=False)
    return Prompter(source=StreamInput(io.StringIO(text)), console=console)


def test_survey_repeats_until_confirmed():
    script = (
        "Ann\n30\n1 Main St\n100\nf\nn\n"
        "Ann Lee\nabc\n31\n2 Elm St\n50,000.00\nx\nf\ny\n"
        "\n"
    )
    answers = run_survey(scripted(script))
    assert answers == {
        "name": "Ann Lee",
        "age": 31,
        "address": "2 Elm St",
        "salary": 50000.0,
        "gender": "f",
    }


def test_survey_without_pause():
    p = scripted("Bo\n40\nHere\n1\nm\ny\nleft over\n")
    run_survey(p, pause=False)
    assert p.read_line_allow_empty("") == "left over"


def test_format_answers():
    lines = format_answers({
        "name": "Ann",
        "age": 31,
        "address": "2 Elm St",
        "salary": 50000.0,
        "gender": "f",
    })
    assert lines == [
        "Name: Ann, age: 31, gender: f",
        "2 Elm St",
        "Salary:  50,000.00",
    ]

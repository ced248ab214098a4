import argparse
import logging
import sys

GENDERS = ["m", "f", "t"]


def run_survey(prompter, pause: bool = True) -> dict:
    """Ask for the survey fields until the user confirms them."""
    while True:
        answers = {
            "name": prompter.read_line_non_empty("Enter your name"),
            "age": prompter.read_int("Enter your age"),
            "address": prompter.read_line_non_empty("Enter your street address"),
            "salary": prompter.read_double("Enter your annual salary"),
            "gender": prompter.read_from_options("Enter gender (m/f/t)", GENDERS),
        }
        if prompter.read_yes_no("Is this correct?") == "y":
            break

    if pause:
        prompter.pause()
    return answers


def format_answers(answers: dict) -> list[str]:
    return [
        f"Name: {answers['name']}, age: {answers['age']}, gender: {answers['gender']}",
        answers["address"],
        f"Salary: {answers['salary']:10,.2f}",
    ]


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Prompter demo - asks a few typed questions on the console"
    )
    parser.add_argument(
        "--no-pause", action="store_true",
        help="Don't wait for <Enter> before showing the summary",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log rejected answers",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    from prompter.prompter import Prompter
    from prompter.ui.console import console
    prompter = Prompter(console=console)

    try:
        answers = run_survey(prompter, pause=not args.no_pause)
    except (EOFError, KeyboardInterrupt):
        console.print()
        sys.exit(1)

    for line in format_answers(answers):
        console.print(line, markup=False, highlight=False)


if __name__ == "__main__":
    main()

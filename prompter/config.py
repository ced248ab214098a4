from dataclasses import dataclass


@dataclass
class PrompterConfig:
    # Prompt text
    empty_prompt: str = "Press <Enter> to continue: "
    yes_no_suffix: str = " (y/n): "
    prompt_suffix: str = ": "
    prompt_endings: tuple[str, ...] = (":", ": ", ">")

    # Numeric retry messages
    int_error: str = "Enter a valid integer"
    long_error: str = "Enter a valid long integer"
    double_error: str = "Enter a valid decimal"

    # Number format, fixed rather than taken from the host locale
    grouping_separator: str = ","
    decimal_separator: str = "."

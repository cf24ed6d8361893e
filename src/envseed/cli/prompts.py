"""Interactive confirmation for destructive commands."""

from collections.abc import Callable

from rich.console import Console

console = Console()


def confirm(prompt: str, input_func: Callable[[str], str] | None = None) -> bool:
    """Ask once for confirmation.

    Only an answer of exactly "y" (surrounding whitespace ignored) proceeds.
    There is no re-prompting; empty input, end of input and Ctrl+C all
    count as "no".

    Args:
        prompt: Text shown before the cursor.
        input_func: Reads one line of input. Defaults to the rich console.

    Returns:
        True if the user confirmed.
    """
    read = input_func or console.input
    try:
        answer = read(prompt)
    except (EOFError, KeyboardInterrupt):
        return False
    return answer.strip() == "y"

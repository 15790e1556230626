"""
CLI interface for passgen.
"""

import sys
import logging
import threading
from typing import Optional

import click
import pyperclip

from .exceptions import PasswordGenerationError
from .generator import PasswordEngine, PoolConfig
from .utils.validation import get_pool_warning


logger = logging.getLogger(__name__)


def clear_clipboard(value: str) -> None:
    """Clear the clipboard if it still holds the generated password."""
    try:
        if pyperclip.paste() == value:
            pyperclip.copy("")
    except pyperclip.PyperclipException as e:
        logger.debug(f"Could not clear clipboard: {e}")


def copy_to_clipboard(value: str, clear_after: int) -> bool:
    """
    Copy a password to the clipboard, optionally clearing it later.

    Args:
        value: Password to copy
        clear_after: Seconds before the clipboard is cleared, 0 to keep it

    Returns:
        True if the password was copied
    """
    try:
        pyperclip.copy(value)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard unavailable: {e}")
        return False

    if clear_after > 0:
        # Non-daemon so the process waits to clear the clipboard before exiting
        timer = threading.Timer(clear_after, clear_clipboard, args=(value,))
        timer.daemon = False
        timer.start()

    return True


@click.command()
@click.option("--length", "-l", default=16, show_default=True, type=click.IntRange(min=0),
              help="Total password length")
@click.option("--digits", "-d", "num_digits", default=4, show_default=True,
              type=click.IntRange(min=0), help="Number of digits")
@click.option("--symbols", "-s", "num_symbols", default=4, show_default=True,
              type=click.IntRange(min=0), help="Number of symbols")
@click.option("--no-uppercase", is_flag=True, help="Exclude uppercase letters")
@click.option("--allow-repeat", is_flag=True, help="Allow characters to repeat")
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(min=1),
              help="Number of passwords to generate")
@click.option("--lower", envvar="PASSGEN_LOWER", help="Custom lowercase letter pool")
@click.option("--upper", envvar="PASSGEN_UPPER", help="Custom uppercase letter pool")
@click.option("--digit-chars", envvar="PASSGEN_DIGITS", help="Custom digit pool")
@click.option("--symbol-chars", envvar="PASSGEN_SYMBOLS", help="Custom symbol pool")
@click.option("--copy", "-c", is_flag=True, help="Copy the last password to the clipboard")
@click.option("--clear-after", default=60, show_default=True, type=click.IntRange(min=0),
              help="Seconds before clearing the clipboard (0 keeps it)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(length: int, num_digits: int, num_symbols: int, no_uppercase: bool,
        allow_repeat: bool, count: int, lower: Optional[str], upper: Optional[str],
        digit_chars: Optional[str], symbol_chars: Optional[str], copy: bool,
        clear_after: int, verbose: bool) -> None:
    """passgen - Generate cryptographically secure passwords."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    for name, chars in (("lower", lower), ("upper", upper),
                        ("digit", digit_chars), ("symbol", symbol_chars)):
        warning = get_pool_warning(chars)
        if warning:
            click.echo(f"Warning: {name} {warning[0].lower()}{warning[1:]}", err=True)

    engine = PasswordEngine(PoolConfig(
        lower=lower,
        upper=upper,
        digits=digit_chars,
        symbols=symbol_chars,
    ))

    password = ""
    try:
        for _ in range(count):
            password = engine.generate(
                length,
                num_digits,
                num_symbols,
                exclude_uppercase=no_uppercase,
                allow_repeat=allow_repeat
            )
            click.echo(password)
    except PasswordGenerationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if copy:
        if copy_to_clipboard(password, clear_after):
            message = "🔐 Password copied to clipboard"
            if clear_after > 0:
                message += f" (clearing in {clear_after} seconds)"
            click.echo(f"{message}.", err=True)
        else:
            click.echo("Could not copy to clipboard.", err=True)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()

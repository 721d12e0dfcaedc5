"""
CLI interface for pwgen.
"""

import sys
import logging
import threading
import click
from typing import Optional

from . import __version__
from .exceptions import PwgenException
from .utils.validation import DEFAULT_LENGTH, validate_config
from .utils.password_generator import PasswordGenerator

logger = logging.getLogger(__name__)


def copy_to_clipboard(value: str, clear_after: int) -> Optional[threading.Timer]:
    """
    Copy value to clipboard and schedule clearing it.

    The clear timer is a daemon thread, so it only fires while the
    process is still running.
    """
    import pyperclip

    pyperclip.copy(value)
    click.echo("🔐 Password copied to clipboard.", err=True)

    if clear_after <= 0:
        return None

    def clear_clipboard() -> None:
        try:
            # Leave the clipboard alone if the user copied something else
            if pyperclip.paste() == value:
                pyperclip.copy("")
        except pyperclip.PyperclipException as e:
            logger.warning(f"Failed to clear clipboard: {e}")

    click.echo(f"   Clipboard will be cleared in {clear_after} seconds.", err=True)
    timer = threading.Timer(clear_after, clear_clipboard)
    timer.daemon = True
    timer.start()
    return timer


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--length", "-l", default=DEFAULT_LENGTH, type=int, show_default=True, help="Password length")
@click.option("--digits", "-d", is_flag=True, help="Generate passwords with digits")
@click.option("--symbols", "-s", is_flag=True, help="Generate passwords with symbols")
@click.option("--only-digits", "-o", is_flag=True, help="Generate passwords with only digits")
@click.option("--copy", "-c", is_flag=True, help="Copy the password to the clipboard")
@click.option("--clear-after", default=60, type=click.IntRange(min=0), show_default=True,
              help="Seconds before a copied password is cleared from the clipboard (0 to keep)")
@click.option("--quiet", "-q", is_flag=True, help="Print only the password")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="pwgen")
def cli(length: int, digits: bool, symbols: bool, only_digits: bool, copy: bool,
        clear_after: int, quiet: bool, debug: bool) -> None:
    """pwgen - Generate cryptographically secure passwords."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = validate_config(
            length=length,
            digits=digits,
            symbols=symbols,
            only_digits=only_digits
        )
        generator = PasswordGenerator(config)
        password = generator.generate()
    except PwgenException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if quiet:
        click.echo(password)
    else:
        click.echo(f"Password: {password}")
        click.echo(
            f"🔐 Generated {config.length}-character password using: {generator.get_charset_info()}",
            err=True
        )

    if copy:
        try:
            copy_to_clipboard(password, clear_after)
        except Exception as e:
            click.echo(f"Could not copy to clipboard: {e}", err=True)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()

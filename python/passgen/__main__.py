"""
CLI interface for passgen.
"""

import logging
import random
import sys
import click
from typing import Optional, Tuple

from .charsets import CHARACTER_SETS, DEFAULT_CHARACTER_SETS, get_character_set
from .exceptions import InvalidArgumentError
from .generator import DEFAULT_LENGTH, PasswordGenerator, Strategy, describe_character_sets
from .keychain import KeychainManager, get_keychain_manager
from .utils.clipboard import CLIPBOARD_CLEAR_SECONDS, copy_to_clipboard, hold_clipboard
from .utils.validation import MIN_LENGTH

logger = logging.getLogger(__name__)


class CliContext:
    """Context object for sharing settings across commands."""

    def __init__(self, use_keychain: bool = True):
        self.use_keychain = use_keychain
        self._keychain: Optional[KeychainManager] = None

    @property
    def keychain(self) -> KeychainManager:
        """Keychain manager, created on first use."""
        if self._keychain is None:
            self._keychain = get_keychain_manager(enabled=self.use_keychain)
        return self._keychain


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default="WARNING",
    help="Logging verbosity (default: WARNING)",
)
@click.option(
    "--no-keychain",
    is_flag=True,
    help="Disable keychain integration",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, no_keychain: bool) -> None:
    """passgen - Generate passwords that use every selected character set."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = CliContext(use_keychain=not no_keychain)


@cli.command()
@click.option("--length", "-l", default=DEFAULT_LENGTH, type=click.IntRange(min=MIN_LENGTH),
              help=f"Password length (at least {MIN_LENGTH}, default: {DEFAULT_LENGTH})")
@click.option("--set", "-s", "set_names", multiple=True,
              type=click.Choice([charset.name for charset in CHARACTER_SETS], case_sensitive=False),
              help="Character set to include; repeat for more (default: upper, lower, digits)")
@click.option("--allow-ambiguous", is_flag=True, help="Allow ambiguous characters (I, O, l)")
@click.option("--count", "-n", default=1, type=click.IntRange(min=1),
              help="Number of passwords to generate")
@click.option("--strategy", default=Strategy.COVERAGE.value,
              type=click.Choice([strategy.value for strategy in Strategy]),
              help="coverage places one character per set; rejection resamples until covered")
@click.option("--seed", type=int, help="Seed for reproducible output (not secret!)")
@click.option("--copy", "-c", is_flag=True, help="Copy the first password to clipboard")
@click.option("--clear-after", default=CLIPBOARD_CLEAR_SECONDS, type=click.FloatRange(min=0),
              help=f"Seconds to wait before clearing the clipboard; 0 keeps it "
                   f"(default: {CLIPBOARD_CLEAR_SECONDS})")
@click.option("--save", nargs=2, type=str, metavar="SERVICE USERNAME",
              help="Store the first password in the system keychain")
@click.option("--quiet", "-q", is_flag=True, help="Print passwords only")
@click.pass_obj
def generate(cli_ctx: CliContext, length: int, set_names: Tuple[str, ...], allow_ambiguous: bool,
             count: int, strategy: str, seed: Optional[int], copy: bool, clear_after: float,
             save: Optional[Tuple[str, str]], quiet: bool) -> None:
    """Generate one or more passwords."""
    if set_names:
        character_sets = [get_character_set(name) for name in set_names]
    else:
        character_sets = list(DEFAULT_CHARACTER_SETS)

    rng = None
    if seed is not None:
        logger.warning("Seeded output is reproducible and must not be used as a real password")
        rng = random.Random(seed)

    generator = PasswordGenerator(rng=rng, strategy=Strategy(strategy))

    try:
        passwords = [
            generator.generate(character_sets, length, allow_ambiguous)
            for _ in range(count)
        ]
    except InvalidArgumentError as e:
        click.echo(f"Error generating password: {e}", err=True)
        sys.exit(2)

    if not quiet:
        charset_desc = describe_character_sets(character_sets, allow_ambiguous)
        click.echo(f"🔐 Generated {length}-character password using: {charset_desc}", err=True)

    for password in passwords:
        click.echo(password)

    failed = False

    if save:
        service, username = save
        if cli_ctx.keychain.store_password(service, username, passwords[0]):
            if not quiet:
                click.echo(f"✅ Password saved to keychain as {username}@{service}.", err=True)
        else:
            click.echo("❌ Failed to save password to keychain.", err=True)
            failed = True

    if copy:
        if not copy_to_clipboard(passwords[0]):
            click.echo("❌ Could not copy to clipboard.", err=True)
            sys.exit(1)

        if clear_after <= 0:
            if not quiet:
                click.echo("✅ Password copied to clipboard.", err=True)
        else:
            # Stay alive until the clipboard is cleared
            if not quiet:
                click.echo(f"✅ Password copied to clipboard, clearing in {clear_after:g}s "
                           "(Ctrl-C to clear now)...", err=True)
            if not hold_clipboard(passwords[0], clear_after):
                click.echo("❌ Could not clear clipboard.", err=True)
                failed = True
            elif not quiet:
                click.echo("🧹 Clipboard cleared.", err=True)

    if failed:
        sys.exit(1)


@cli.command()
def charsets() -> None:
    """List the available character sets."""
    for charset in CHARACTER_SETS:
        click.echo(f"{charset.name}:")
        click.echo(f"  Members: {' '.join(charset.members)}")
        ambiguous = " ".join(charset.ambiguous) if charset.ambiguous else "none"
        click.echo(f"  Ambiguous: {ambiguous}")


@cli.command()
@click.argument("action", type=click.Choice(["status", "test"]))
@click.pass_obj
def keychain(cli_ctx: CliContext, action: str) -> None:
    """Check keychain integration."""
    manager = cli_ctx.keychain

    if action == "status":
        if manager.is_supported():
            click.echo(f"✅ Keychain integration: {manager.get_backend_name()}")
        else:
            click.echo("❌ Keychain integration: Not supported or disabled")

    elif action == "test":
        if manager.test_keychain_access():
            click.echo("✅ Keychain access test passed")
        else:
            click.echo("❌ Keychain access test failed", err=True)
            sys.exit(1)


def main() -> None:
    """Main entry point for the CLI application."""
    cli(auto_envvar_prefix="PASSGEN")


if __name__ == "__main__":
    main()

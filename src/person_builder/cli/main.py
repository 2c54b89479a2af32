"""
Main CLI entry point for person-builder using Click.

Usage:
    person-builder                 # print the demo person
    person-builder demo
    person-builder build [--age N] [--street S] [--city S] ... [--validate]
"""

from __future__ import annotations

import logging
from typing import Optional

import click

from person_builder import __version__
from person_builder.builders import PersonBuilder
from person_builder.demo import build_demo_person
from person_builder.validation import PersonValidator
from person_builder.writers import render_person


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class Config:
    """Shared configuration for CLI commands."""

    def __init__(self) -> None:
        self.verbose = False
        self.debug = False
        self.indent = 2


pass_config = click.make_pass_decorator(Config, ensure=True)


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Spaces per JSON indentation level",
)
@click.version_option(version=__version__, prog_name="person-builder")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool, indent: int) -> None:
    """Faceted builder demo: build a person one facet at a time."""
    ctx.ensure_object(Config)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    ctx.obj.indent = indent
    setup_logging(verbose=verbose, debug=debug)

    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)


@cli.command()
@pass_config
def demo(config: Config) -> None:
    """Print the demo person.

    Builds a person aged 21 living at "Street Address", 050822,
    HCM City and working at MoMo as a Backend Developer.

    Example:
        person-builder demo
    """
    person = build_demo_person()
    click.echo(render_person(person, indent=config.indent))


@cli.command()
@click.option("--age", type=int, help="Age in years")
@click.option("--street", help="Street address")
@click.option("--postal-code", "postal_code", help="Postal code")
@click.option("--city", help="City")
@click.option("--employer", help="Employer name")
@click.option("--position", help="Job title")
@click.option("--income", type=int, help="Annual income")
@click.option("--validate", "run_validation", is_flag=True, help="Report suspicious values")
@pass_config
def build(
    config: Config,
    age: Optional[int],
    street: Optional[str],
    postal_code: Optional[str],
    city: Optional[str],
    employer: Optional[str],
    position: Optional[str],
    income: Optional[int],
    run_validation: bool,
) -> None:
    """Build a person from options and print it.

    Each option is applied through its facet builder; options left out
    keep their defaults. Validation only reports, it never fails.

    Example:
        person-builder build --age 30 --city Hanoi --employer MoMo --income -5 --validate
    """
    logger = logging.getLogger("build")

    builder = PersonBuilder()

    if age is not None:
        builder.common_info.with_age(age)

    address = builder.address
    if street is not None:
        address.at(street)
    if postal_code is not None:
        address.with_postal_code(postal_code)
    if city is not None:
        address.in_city(city)

    employment = builder.employment
    if employer is not None:
        employment.at(employer)
    if position is not None:
        employment.as_a(position)
    if income is not None:
        employment.earning(income)

    person = builder.build()
    click.echo(render_person(person, indent=config.indent))

    if run_validation:
        logger.info("Validating person...")
        validation = PersonValidator(check_unset=False).validate(person)

        for issue in validation.errors:
            click.echo(click.style(f"Error: {issue.field}: {issue.message}", fg="red"), err=True)
        for issue in validation.warnings:
            click.echo(
                click.style(f"Warning: {issue.field}: {issue.message}", fg="yellow"),
                err=True,
            )


def app(args: Optional[list[str]] = None) -> int:
    """
    Main application entry point (for testing).

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    try:
        cli(args, standalone_mode=False)
        return 0
    except click.ClickException as e:
        e.show()
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()

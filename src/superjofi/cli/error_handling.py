"""CLI error reporting."""

from contextlib import contextmanager
from typing import Iterator

import click

from superjofi.domain.errors import DomainError
from superjofi.utils.logger import get_logger

logger = get_logger(__name__)


def handle_domain_error(ctx: click.Context, error: ValueError, action: str | None = None) -> None:
    """Print ``Error: ...`` on stderr and exit with status 1.

    Args:
        ctx: Click context of the failing command
        error: Domain or parsing error
        action: Optional prefix naming what failed, e.g. "Invalid date format"
    """
    logger.debug(f"Command '{ctx.info_name}' failed: {error!r}")
    message = f"{action}: {error}" if action else str(error)
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


@contextmanager
def domain_errors(ctx: click.Context) -> Iterator[None]:
    """Report a DomainError raised inside the block and exit."""
    try:
        yield
    except DomainError as e:
        handle_domain_error(ctx, e)

"""Usage text."""

import click


@click.command("help")
@click.pass_context
def help_cmd(ctx: click.Context) -> None:
    """Show this message."""
    parent = ctx.parent if ctx.parent is not None else ctx
    click.echo(parent.get_help())

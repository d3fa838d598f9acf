"""Entry point for the formview command-line interface."""

import click

from formview import __version__
from formview.cli.commands.render import render


@click.group()
@click.version_option(version=__version__, prog_name="formview")
def main() -> None:
    """formview - render form validation errors as markup."""
    pass


main.add_command(render)


if __name__ == "__main__":  # pragma: no cover
    main()

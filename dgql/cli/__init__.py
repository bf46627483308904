"""Command-line interface for schema augmentation."""

import rich_click as click

from .. import __version__
from .generate import generate_command
from .validate import validate_command

# Configure rich-click styling
click.rich_click.TEXT_MARKUP = "rich"
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.STYLE_OPTION = "bold cyan"
click.rich_click.STYLE_ARGUMENT = "bold yellow"
click.rich_click.STYLE_COMMAND = "bold green"
click.rich_click.STYLE_SWITCH = "bold blue"


@click.group(name="dgql")
@click.version_option(version=__version__, prog_name="dgql")
def main() -> None:
    """🧬 **dgql** - Generate CRUD GraphQL schemas from object types.

    Derives Input, Ref, Update, Filter and Payload types plus Query and
    Mutation operations for every object type, and checks the result
    against registered validation rules.
    """
    pass


main.add_command(generate_command)
main.add_command(validate_command)


if __name__ == "__main__":
    main()


__all__ = ["main"]

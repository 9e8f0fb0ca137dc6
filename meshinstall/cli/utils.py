from functools import wraps

import click
from click import ClickException


def standard_error_handler(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            result = func(*args, **kwargs)
            return result
        except (ClickException, click.exceptions.Abort):
            raise
        except Exception as e:  # noqa
            ce = ClickException(message=str(e))
            raise ce from e

    return wrapper


class AliasedGroup(click.Group):
    """
    A group that accepts any unambiguous prefix of a command name,
    e.g. 'meshinstall pre' for 'meshinstall pre-install'
    """

    def get_command(self, ctx, cmd_name):
        rv = click.Group.get_command(self, ctx, cmd_name)
        if rv is not None:
            return rv
        matches = [x for x in self.list_commands(ctx) if x.startswith(cmd_name)]
        if not matches:
            return None
        elif len(matches) == 1:
            return click.Group.get_command(self, ctx, matches[0])
        ctx.fail(f"Too many matches: {', '.join(sorted(matches))}")

    def resolve_command(self, ctx, args):
        # always return the full command name
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name, cmd, args

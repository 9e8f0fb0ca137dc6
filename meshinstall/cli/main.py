from meshinstall.cli.installation import (
    crds,
    overrides,
    post_install,
    post_uninstall,
    pre_install,
)
from meshinstall.cli.version import version

from .context import cli


cli.add_command(cmd=overrides, name="overrides")
cli.add_command(cmd=pre_install, name="pre-install")
cli.add_command(cmd=post_install, name="post-install")
cli.add_command(cmd=post_uninstall, name="post-uninstall")
cli.add_command(cmd=crds, name="crds")
cli.add_command(cmd=version, name="version")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()

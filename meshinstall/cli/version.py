import click
from meshinstall.cli.console import info


@click.command()
def version():
    import meshinstall.configuration as config

    info(f"meshinstall version: {config.__VERSION__}")

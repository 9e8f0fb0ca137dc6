import click

from meshinstall.cli.console import info, success
from meshinstall.cli.utils import AliasedGroup, standard_error_handler
from meshinstall.installer import MeshType
from meshinstall.types import Encryption, Install, SecretRef

MESH_CHOICE = click.Choice([m.value for m in MeshType])


def _encryption(tls: bool, secret, secret_namespace) -> Encryption:
    return Encryption(
        tls_enabled=tls,
        secret=SecretRef(name=secret, namespace=secret_namespace) if secret else None,
    )


@click.command(
    "overrides",
    help=(
        "Print the chart values for a mesh; usage: 'meshinstall overrides istio --tls"
        " > values.yaml'"
    ),
)
@click.argument("mesh", type=MESH_CHOICE)
@click.option("--tls/--no-tls", default=False, help="Enable mutual TLS")
@click.option(
    "--secret",
    help="Secret with the root certificate to use instead of a self-signed one",
    type=str,
)
@click.option("--secret-namespace", help="Namespace of the --secret", type=str)
@standard_error_handler
def overrides(mesh, tls, secret, secret_namespace):
    from meshinstall import api

    install = Install(mesh=mesh, encryption=_encryption(tls, secret, secret_namespace))
    click.echo(api.overrides(install))


@click.command("pre-install", help="Prepare the cluster before the mesh chart is deployed")
@click.argument("mesh", type=MESH_CHOICE)
@click.pass_context
@standard_error_handler
def pre_install(ctx, mesh):
    from alive_progress import alive_bar
    from meshinstall import api

    with alive_bar(
        total=None,
        length=20,
        title=f"Preparing cluster for {mesh}",
        bar="smooth",
        spinner="classic",
        stats=False,
        dual_line=True,
    ):
        api.pre_install(
            mesh, kubeconfig=ctx.obj["kubeconfig"], kubecontext=ctx.obj["context"]
        )
    success(f"Cluster prepared for {mesh}")


@click.command(
    "post-install", help="Fix up the resources the mesh chart deployment created"
)
@click.argument("mesh", type=MESH_CHOICE)
@click.option(
    "--release", "-r", help="The release name the chart was deployed with", type=str
)
@click.option("--tls/--no-tls", default=False, help="The chart was deployed with mTLS")
@click.pass_context
@standard_error_handler
def post_install(ctx, mesh, release, tls):
    from meshinstall import api

    install = Install(mesh=mesh, encryption=Encryption(tls_enabled=tls))
    api.post_install(
        install,
        release_name=release,
        kubeconfig=ctx.obj["kubeconfig"],
        kubecontext=ctx.obj["context"],
    )
    success(f"Post-install for {mesh} done")


@click.command(
    "post-uninstall", help="Clean up after the mesh chart release was removed"
)
@click.argument("mesh", type=MESH_CHOICE)
@click.pass_context
@standard_error_handler
def post_uninstall(ctx, mesh):
    from meshinstall import api

    api.post_uninstall(
        mesh, kubeconfig=ctx.obj["kubeconfig"], kubecontext=ctx.obj["context"]
    )
    success(f"Post-uninstall for {mesh} done")


@click.group("crds", cls=AliasedGroup, help="Manage the mesh CRDs")
def crds():
    pass


@crds.command("remove", help="Remove all registered istio.io CRDs")
@click.option("--force", "-f", help="Delete without prompt", is_flag=True)
@click.pass_context
@standard_error_handler
def remove(ctx, force):
    from alive_progress import alive_bar
    from tabulate import tabulate
    from meshinstall import api

    if not force:
        click.confirm(
            "Removing the Istio CRDs deletes all Istio resources. Continue?",
            abort=True,
        )
    with alive_bar(
        total=None,
        length=20,
        title="Removing Istio CRDs",
        bar="smooth",
        spinner="classic",
        stats=False,
        dual_line=True,
    ):
        removed = api.remove_istio_crds(
            kubeconfig=ctx.obj["kubeconfig"], kubecontext=ctx.obj["context"]
        )
    if removed:
        rows = [name.split(".", 1) for name in removed]
        info(tabulate(rows, headers=["NAME", "GROUP"], tablefmt="plain"))
    success(f"Removed {len(removed)} CRD(s)")

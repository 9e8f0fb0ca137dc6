class MeshInstallError(RuntimeError):
    pass


class ResourceNotFound(MeshInstallError):
    pass


class ResourceAlreadyExists(MeshInstallError):
    pass


class ManifestError(MeshInstallError):
    pass


class ClusterError(MeshInstallError):
    pass


class CrdBootstrapError(ClusterError):
    pass


class SecurityGrantError(ClusterError):
    pass


class WebhookRepairError(ClusterError):
    pass


class InstallerError(MeshInstallError):
    pass

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SecretRef:
    name: str = field(
        metadata=dict(help="Name of the secret holding the mesh root certificate")
    )
    namespace: Optional[str] = field(
        default=None,
        metadata=dict(help="Namespace of the secret (default: the mesh namespace)"),
    )


@dataclass(frozen=True)
class Encryption:
    tls_enabled: bool = field(
        default=False,
        metadata=dict(help="Enable mutual TLS between mesh workloads", is_flag=True),
    )
    # externally supplied trust material; None means a self-signed root
    secret: Optional[SecretRef] = None


@dataclass(frozen=True)
class Install:
    mesh: str = field(metadata=dict(help="The mesh to install (consul, istio)"))
    encryption: Optional[Encryption] = None
    release_name: Optional[str] = field(
        default=None,
        metadata=dict(help="The chart release name (default: MESHINSTALL_RELEASE_NAME)"),
    )
    namespace: Optional[str] = field(
        default=None,
        metadata=dict(help="Install into this namespace instead of the mesh default"),
    )

    @property
    def tls_enabled(self) -> bool:
        return bool(self.encryption and self.encryption.tls_enabled)

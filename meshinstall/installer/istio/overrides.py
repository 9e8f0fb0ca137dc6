from typing import Optional

from meshinstall.misc.overrides import render_overrides
from meshinstall.types import Encryption

MTLS_ENABLED = "MTLS_ENABLED"
SELF_SIGNED = "SELF_SIGNED"

OVERRIDES_YAML = """#overrides
global:
  mtls:
    enabled: @@MTLS_ENABLED@@
  crds: false
security:
  selfSigned: @@SELF_SIGNED@@
"""


def get_overrides(encryption: Optional[Encryption]) -> str:
    self_signed = True
    mtls_enabled = False
    if encryption is not None and encryption.tls_enabled:
        mtls_enabled = True
        # a secret reference carries an externally supplied root certificate
        if encryption.secret is not None:
            self_signed = False
    return render_overrides(
        OVERRIDES_YAML, {MTLS_ENABLED: mtls_enabled, SELF_SIGNED: self_signed}
    )

__all__ = [
    "Install",
    "Encryption",
    "SecretRef",
]


from .install import Install, Encryption, SecretRef

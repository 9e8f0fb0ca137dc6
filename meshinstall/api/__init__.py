from .install import *  # noqa

"""linehook -- LINE webhook signature validation and messaging helpers.

Top-level convenience re-exports::

    from linehook import validate_signature, compute_signature
    from linehook.messaging import MessagingClient, TextMessage
"""

__version__ = "0.1.0"

from linehook.protocol.errors import (  # noqa: E402
    InvalidKeyError,
    InvalidSignatureFormatError,
    LineHookError,
)
from linehook.protocol.signature import (  # noqa: E402
    check_signature,
    compute_signature,
    validate_signature,
)

__all__ = [
    "__version__",
    "InvalidKeyError",
    "InvalidSignatureFormatError",
    "LineHookError",
    "check_signature",
    "compute_signature",
    "validate_signature",
]

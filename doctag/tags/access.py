from __future__ import annotations

from .base import Signature, TagDescriptor
from .flags import BooleanTag


class PrivateTag(BooleanTag):
    descriptor = TagDescriptor(
        pattern="private",
        key="private",
        signature=Signature(long="private", short="PRI",
                            tooltip="For internal use only; may change without notice"),
    )


class ProtectedTag(BooleanTag):
    descriptor = TagDescriptor(
        pattern="protected",
        key="protected",
        signature=Signature(long="protected", short="PRO",
                            tooltip="Intended to be used by subclasses only"),
    )

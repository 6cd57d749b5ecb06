"""BaseService — foundation for typetag services.

Every service receives the frozen :class:`TypetagSettings` at construction
time and reads its decode and display options from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typetag.domain.decode import decode_values
from typetag.services._helpers import describe_value

if TYPE_CHECKING:
    from typetag.config.settings import TypetagSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ClassifyService(BaseService):
            def classify(self, text: str) -> ServiceResult:
                items = self._decode(text)
                ...
    """

    def __init__(self, settings: TypetagSettings) -> None:
        self._settings = settings

    def _decode(self, text: str) -> list[Any]:
        """Decode a JSON array per the ``[input]`` config. Raises DecodeError."""
        cfg = self._settings.input
        return decode_values(text, tagged=cfg.tagged_values, objects=cfg.objects)

    def _describe(self, value: Any) -> str:
        return describe_value(value, max_width=self._settings.output.max_value_width)

    def _meta(self) -> dict[str, Any] | None:
        """Decode options for ``ServiceResult.meta``; None unless verbose."""
        if not self._settings.verbose:
            return None
        cfg = self._settings.input
        return {"tagged_values": cfg.tagged_values, "objects": cfg.objects}

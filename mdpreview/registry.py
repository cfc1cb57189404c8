"""
Ordered, immutable collection of markdown extension definitions.
"""
import logging
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Optional, Tuple

from .models import INLINE, LEVELS, ExtensionDefinition, ExtensionToken

logger = logging.getLogger(__name__)

Match = Tuple[ExtensionDefinition, ExtensionToken]


class ExtensionRegistry:
    """
    Registration order is the only precedence rule: when several extensions
    could start at the same position, the first one registered whose
    ``recognize`` succeeds wins.
    """

    def __init__(self, definitions: Iterable[ExtensionDefinition] = ()):
        definitions = tuple(definitions)
        by_name = {}
        for definition in definitions:
            if definition.level not in LEVELS:
                raise ValueError(
                    f"Extension '{definition.name}' has invalid level '{definition.level}'"
                )
            if definition.name in by_name:
                raise ValueError(f"Duplicate extension name: {definition.name}")
            by_name[definition.name] = definition

        self._definitions = definitions
        self._by_name = MappingProxyType(by_name)
        self._inline = tuple(d for d in definitions if d.is_inline())
        self._block = tuple(d for d in definitions if d.is_block())
        logger.debug("Registered markdown extensions: %s", ", ".join(self.names))

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self._definitions)

    @property
    def inline(self) -> Tuple[ExtensionDefinition, ...]:
        return self._inline

    @property
    def block(self) -> Tuple[ExtensionDefinition, ...]:
        return self._block

    def level(self, level: str) -> Tuple[ExtensionDefinition, ...]:
        if level not in LEVELS:
            raise ValueError(f"Unknown extension level: {level}")
        return self._inline if level == INLINE else self._block

    def get(self, name: str) -> Optional[ExtensionDefinition]:
        return self._by_name.get(name)

    def match(
        self,
        level: str,
        text: str,
        plausible: Optional[Callable[[ExtensionDefinition], bool]] = None,
    ) -> Optional[Match]:
        """
        Offer *text* to each extension of *level* in registration order.

        Args:
            level: ``"inline"`` or ``"block"``
            text: Remaining input, candidate construct at index 0
            plausible: Optional replacement for the per-definition probe
                check (the host dispatcher passes a memoised one)

        Returns:
            ``(definition, token)`` for the first extension that recognizes
            *text*, or None
        """
        for definition in self.level(level):
            if plausible is not None:
                if not plausible(definition):
                    continue
            elif not definition.is_plausible(text):
                continue
            token = definition.recognize(text)
            if token is not None:
                return definition, token
        return None

    def __iter__(self) -> Iterator[ExtensionDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"ExtensionRegistry({list(self.names)!r})"


def default_registry() -> ExtensionRegistry:
    """The built-in extensions: coloredText, highlight, spoiler, admonition."""
    from .markdown_plugins import DEFAULT_EXTENSIONS

    return ExtensionRegistry(DEFAULT_EXTENSIONS)

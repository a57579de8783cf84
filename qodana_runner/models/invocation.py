"""Container runtime invocation models."""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class Binding:
    """A host-to-container path or port mapping."""

    host: Union[str, int]
    container: Union[str, int]

    def render(self) -> str:
        return f"{self.host}:{self.container}"

    @classmethod
    def optional(cls, host: Optional[Union[str, int]], container: Union[str, int]) -> Optional['Binding']:
        """Return a binding, or None when the host side is absent."""
        if host is None:
            return None
        return cls(host, container)


def render_bindings(bindings: List[Optional[Binding]]) -> Tuple[str, ...]:
    """Render present bindings in order, dropping absent ones."""
    return tuple(binding.render() for binding in bindings if binding is not None)


@dataclass(frozen=True)
class Invocation:
    """A fully resolved container runtime command.

    ``env_parameters`` are opaque tokens: either ``KEY=value`` assignments or
    bare flags for the image entrypoint. They are forwarded verbatim with
    ``-e``; interpreting them is left to the container.
    """

    executable: str
    action: str
    target: str
    options: Tuple[str, ...] = ()
    arguments: Tuple[str, ...] = ()
    env_parameters: Tuple[str, ...] = ()
    volume_bindings: Tuple[str, ...] = ()
    port_bindings: Tuple[str, ...] = ()

    def to_command(self) -> List[str]:
        """Render the argv list handed to the process executor."""
        command = [self.executable, self.action, *self.options]
        for port in self.port_bindings:
            command.extend(['-p', port])
        for volume in self.volume_bindings:
            command.extend(['-v', volume])
        for param in self.env_parameters:
            command.extend(['-e', param])
        command.append(self.target)
        command.extend(self.arguments)
        return command

    def __str__(self) -> str:
        return ' '.join(self.to_command())

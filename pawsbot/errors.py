"""Exceptions raised by the PawsBot engine."""


class PawsBotError(Exception):
    """Base class for engine errors."""


class GenerationError(PawsBotError):
    """The generation backend failed or returned no usable text."""


class UnknownNodeError(PawsBotError):
    """A node routed to a target that is not part of the graph."""

    def __init__(self, node: str, target: str):
        super().__init__(f"Unknown node: {node!r} routed to {target!r}")
        self.node = node
        self.target = target

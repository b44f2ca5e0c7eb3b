"""Exception classes for Lienzo.

Provides standardized exceptions for error handling throughout Lienzo.
"""

from __future__ import annotations


class LienzoError(Exception):
    """Base exception for all Lienzo errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(LienzoError):
    """Error during HTML rendering.

    Raised when a renderer cannot produce markup for a node.
    """

    pass


class MalformedNodeError(RenderError):
    """A node breaks the input contract of its renderer.

    Raised for composites without a children sequence, headings with a
    level outside 1-6 and assets without file metadata.
    """

    def __init__(self, node_type: str, message: str) -> None:
        """Initialize malformed node error.

        Args:
            node_type: Class name of the offending node (e.g., "Heading")
            message: Description of the contract violation
        """
        self.node_type = node_type
        super().__init__(f"Malformed {node_type}: {message}")


class NestingDepthError(RenderError):
    """Document nesting exceeded the configured depth limit."""

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(f"Nesting depth {depth} exceeds max_depth={limit}")


class RendererResolutionError(LienzoError):
    """No registered renderer matched a node.

    A registry built by create_default_registry() always carries the
    catch-all renderer, so this means the registry was assembled by hand
    without one.
    """

    def __init__(self, node_type: str) -> None:
        """Initialize resolution error.

        Args:
            node_type: Class name of the node nobody claimed
        """
        self.node_type = node_type
        super().__init__(
            f"No renderer matches {node_type}; "
            "register a catch-all renderer (see FallbackRenderer)"
        )


class SerializationError(LienzoError, ValueError):
    """Serialized data does not describe a known node."""

    pass

"""@renderer decorator for reducing renderer boilerplate.

Works with both functions and classes.

Example (function):
    >>> @renderer(matches=lambda node: isinstance(node, Quote))
    ... def render_quote(node: Quote) -> str:
    ...     return f"<blockquote>{node.text}</blockquote>"
    >>> registry.register(render_quote)

Example (class):
    >>> @renderer(matches=lambda node: isinstance(node, Text), priority=10)
    ... class ShoutingTextRenderer:
    ...     def render(self, node: Text) -> str:
    ...         return node.value.upper()
    >>> registry.register(ShoutingTextRenderer())
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from lienzo.renderers.protocol import DEFAULT_PRIORITY

if TYPE_CHECKING:
    from lienzo.nodes import Node

MatchFunc = Callable[["Node"], bool]
RenderFunc = Callable[["Node"], str]


class FunctionRenderer:
    """Renderer assembled from a predicate and a render callable.

    This is the plain registration record: a priority, a ``matches``
    predicate and a ``render`` function.

    Example:
        >>> r = FunctionRenderer(lambda n: isinstance(n, Text), lambda n: n.value)
        >>> r.priority
        100
    """

    __slots__ = ("_matches", "_render", "priority", "name")

    def __init__(
        self,
        matches: MatchFunc,
        render: RenderFunc,
        *,
        priority: int = DEFAULT_PRIORITY,
        name: str | None = None,
    ) -> None:
        self._matches = matches
        self._render = render
        self.priority = priority
        self.name = name or getattr(render, "__name__", type(self).__name__)

    def matches(self, node: "Node") -> bool:
        return bool(self._matches(node))

    def render(self, node: "Node") -> str:
        return self._render(node)

    def __repr__(self) -> str:
        return f"FunctionRenderer({self.name!r}, priority={self.priority})"


def renderer(
    *,
    matches: MatchFunc,
    priority: int = DEFAULT_PRIORITY,
    name: str | None = None,
) -> Callable[[RenderFunc | type], FunctionRenderer | type]:
    """Decorator to create renderers with minimal boilerplate.

    Args:
        matches: Predicate selecting the nodes this renderer handles
        priority: Resolution precedence (lower wins)
        name: Display name for logs and reprs (defaults to the function or
            class name)

    Returns:
        For a function, a FunctionRenderer ready to register. For a class,
        the same class with ``priority``, ``matches`` and ``name`` filled in.

    Raises:
        TypeError: If a decorated class lacks render() or already defines
            matches().

    """

    def decorator(func_or_class: RenderFunc | type) -> FunctionRenderer | type:
        if isinstance(func_or_class, type):
            if not hasattr(func_or_class, "render"):
                msg = f"Renderer class {func_or_class.__name__} must define render()"
                raise TypeError(msg)
            if hasattr(func_or_class, "matches"):
                msg = (
                    f"Renderer class {func_or_class.__name__} already defines matches(); "
                    "register an instance directly instead of decorating it"
                )
                raise TypeError(msg)
            func_or_class.priority = priority
            func_or_class.matches = lambda self, node: bool(matches(node))
            func_or_class.name = name or func_or_class.__name__
            return func_or_class

        return FunctionRenderer(matches, func_or_class, priority=priority, name=name)

    return decorator

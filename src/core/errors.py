# core/errors.py
"""
Exception types raised while building scenes and rendering them.

Configuration errors are raised eagerly, while the scene graph is being put
together, so that a malformed scene never reaches the render loop.
"""


class SceneConfigurationError(ValueError):
    """The scene graph cannot be built as described (e.g. an unbounded BVH child)."""


class MaterialConfigurationError(ValueError):
    """A material was used without the texture it needs."""


class RenderCancelled(RuntimeError):
    """Rendering was stopped through the cancellation signal before finishing."""

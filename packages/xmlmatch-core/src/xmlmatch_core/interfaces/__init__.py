from .tree import AttributeView, DocumentView, NodeView

__all__ = [
    "AttributeView",
    "DocumentView",
    "NodeView",
]

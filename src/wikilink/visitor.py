"""AST visitor for wikilink documents.

Example — list every link target in a document:

    class TargetCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.targets: list[str] = []

        def visit_wikilink(self, node: WikiLink) -> None:
            self.targets.append(node.destination)

    collector = TargetCollector()
    collector.visit(doc)

Thread Safety:
    Visitors may accumulate mutable state. Create a new visitor per thread.

"""

from __future__ import annotations

from wikilink.nodes import Document, Node, Paragraph, SoftBreak, Text, WikiLink


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_soft_break(self, node: SoftBreak) -> T:
        return self.visit_default(node)

    def visit_wikilink(self, node: WikiLink) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case Text():
                return self.visit_text(node)
            case SoftBreak():
                return self.visit_soft_break(node)
            case WikiLink():
                return self.visit_wikilink(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        for child in getattr(node, "children", ()):
            self.visit(child)


class _WikiLinkCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.links: list[WikiLink] = []

    def visit_wikilink(self, node: WikiLink) -> None:
        self.links.append(node)


def collect_wikilinks(doc: Node) -> list[WikiLink]:
    """All WikiLink nodes under ``doc``, in document order."""
    collector = _WikiLinkCollector()
    collector.visit(doc)
    return collector.links

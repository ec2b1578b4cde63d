"""
pagecheck — Custom Exceptions.

Typed error hierarchy. Document errors are terminal for a run; rule,
render and comment errors are caught where they happen and logged.
"""


class PageCheckError(Exception):
    """Base exception for all pagecheck errors."""


class DocumentError(PageCheckError):
    """The target document cannot be audited. Terminal for the run."""

    note_key = "note_document_error"


class MissingDocument(DocumentError):
    """None of the candidate paths exist."""

    note_key = "note_missing_document"

    def __init__(self, candidates):
        self.candidates = tuple(candidates)
        super().__init__(f"No document found among: {', '.join(self.candidates)}")


class EmptyDocument(DocumentError):
    """The winning candidate contains only whitespace."""

    note_key = "note_empty_document"

    def __init__(self, path):
        self.path = path
        super().__init__(f"Document is empty: {path}")


class UnreadableDocument(DocumentError):
    """The winning candidate exists but could not be read."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}" if reason else f"Cannot read {path}")


class RuleEvaluationFailure(PageCheckError):
    """A markup rule raised while evaluating. The rule counts as failed."""


class LayoutRenderFailure(PageCheckError):
    """Rendering or measuring a page at one viewport width failed."""

    def __init__(self, width: int, reason: str):
        self.width = width
        super().__init__(f"{width}px: {reason}")


class CommentDeliveryFailure(PageCheckError):
    """Posting the review comment failed. Never affects score or exit code."""

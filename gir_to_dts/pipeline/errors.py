"""
Exceptions raised while compiling a GIR document.
"""

from __future__ import annotations


class StructuralError(Exception):
    """Raised when a document cannot be compiled at all.

    This can happen when:
    - The text is not well-formed XML
    - The root element is not <repository>
    - The repository has no <namespace> element
    """

    pass


class ExtractionSkip(Exception):
    """Raised when a single element is missing something it needs.

    Callers catch it at the element that raised it (a parameter, an enum
    member, a method, a class) and leave that element out of the output.
    """

    def __init__(self, element_name: str, reason: str):
        super().__init__(f"<{element_name}>: {reason}")
        self.element_name = element_name
        self.reason = reason

"""
Base builder interface shared by every structural builder.

Defines the fluent contract (``jsdoc`` and ``generate``) and the error raised
when a construct is rendered without one of its required parts.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from ..core import syntax as ts
from ..core.printer import print_node
from ..core.utils import as_lines


class BuilderError(ValueError):
    """Exception raised when a builder is missing a required part."""

    pass


class Builder(ABC):
    """Abstract base class for builders that produce a syntax node."""

    def __init__(self):
        self._comment_lines: List[str] = []

    def jsdoc(self, comment: Optional[Union[str, List[str]]]):
        """
        Attach a doc comment to the construct.

        Args:
            comment: Comment text or list of comment lines

        Returns:
            The builder, for chaining
        """
        self._comment_lines = as_lines(comment)
        return self

    @abstractmethod
    def generate_node(self) -> ts.Node:
        """
        Build the syntax node for this construct.

        Raises:
            BuilderError: If a required part has not been configured
        """
        pass

    def generate(self) -> str:
        """Render the construct to TypeScript text."""
        return print_node(self.generate_node())

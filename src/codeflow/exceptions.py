class CodeflowError(Exception):
    """Base class for every fatal codeflow error."""


class UsageError(CodeflowError):
    """The command line was invoked with the wrong arguments."""


class UnimplementedHookError(CodeflowError, NotImplementedError):
    """
    An integration point the traversal relies on is not wired up.

    Raised for a language without a CFG builder, or a builder subclass that
    leaves one of the classification hooks unimplemented. This signals an
    incomplete build configuration, never a property of the input.
    """


class ParseFailure(CodeflowError):
    """tree-sitter could not produce a clean syntax tree for the source."""

    def __init__(self, message, line=None, column=None):
        super().__init__(message)
        self.line = line
        self.column = column

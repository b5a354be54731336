class InvalidInputError(ValueError):
    """
    Exception raised when a path handed to the generator is not a valid relative path.

    Paths must be forward-slash separated and relative to the root of the source tree.
    Absolute paths, backslashes, empty segments and ``.`` or ``..`` segments are rejected
    before any exclude is generated.

    Attributes:
        path (str): The offending path.
        reason (str): Why the path was rejected.

    Example:
        >>> error = InvalidInputError("/etc/passwd", "absolute paths are not supported")
        >>> str(error)
        "Invalid relative path '/etc/passwd': absolute paths are not supported"
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the offending path and the reason for rejecting it.

        Args:
            path (str): The path that failed validation.
            reason (str): A short description of the violated requirement.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid relative path {path!r}: {reason}")


class RuleTableError(ValueError):
    """
    Exception raised when a built-in rule table has duplicate or unsorted patterns.

    Rule tables are validated once when they are loaded. A failed validation is a
    programming error in the table data and is never corrected silently.

    Example:
        >>> error = RuleTableError("Found duplicate patterns in the file rules: *.mk.")
        >>> str(error)
        'Found duplicate patterns in the file rules: *.mk.'
    """

    pass

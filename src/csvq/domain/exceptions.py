class CSVQError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(CSVQError):
    """Caller supplied an unusable CSV URL."""


class RetrievalError(CSVQError):
    """The CSV could not be fetched (non-2xx status or transport failure)."""

    def __init__(self, message: str, status_code: int | None = None, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class EmptyContentError(CSVQError):
    """The fetched body is empty or whitespace-only."""


class NoRowsError(CSVQError):
    """No non-blank lines remain after splitting the body."""


class AgentNotFoundError(CSVQError):
    """No agent is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Agent '{name}' not found in registry")

NO_AMOUNT_MESSAGE = "Could not find amount in your message. Please include a number."
INTERNAL_FAILURE_MESSAGE = "Failed to parse your message. Please try again."


class InterpreterError(Exception):
    """Base class for errors raised while interpreting transaction text."""


class NoAmountFound(InterpreterError):
    def __init__(self, message: str = NO_AMOUNT_MESSAGE):
        super().__init__(message)
        self.message = message


class LedgerError(Exception):
    """Raised when the ledger book is asked to touch an entry it does not hold."""

# app/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Loading Errors ---

class LexiconSourceUnavailable(DomainError):
    """Raised when a lexicon source cannot be read (missing or unreadable file)."""
    def __init__(self, location: str, reason: str = "not found"):
        self.location = location
        super().__init__(f"Lexicon source '{location}' is unavailable: {reason}.")

class AppError(Exception):
    """Base class for all application-level errors."""
    pass


class DomainError(AppError):
    """Base for domain logic errors."""
    pass

class UnsupportedLanguageError(DomainError):
    def __init__(self, language: str):
        self.language = language
        self.message = f"Language '{language}' is not supported."
        super().__init__(self.message)



class InfrastructureError(AppError):
    """Base for infrastructure-related errors (DB, cache, etc)."""
    pass

class ConfigurationError(InfrastructureError):
    def __init__(self, setting: str):
        self.setting = setting
        self.message = f"{setting} environment variable is not set"
        super().__init__(self.message)

class BackendUnavailableError(InfrastructureError):
    """A backend was unreachable or rejected the diagnostic call.

    The message is the driver's own message, untouched, so callers can pass
    it straight through to clients.
    """
    def __init__(self, backend: str, detail: str = ""):
        self.backend = backend
        self.message = detail
        super().__init__(self.message)

class ProviderError(Exception):
    """Base error for provider failures."""

    def __init__(self, message, provider=None, status_code=None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class QuotaExhaustedError(ProviderError):
    """Provider is rate limiting or out of credits; try the next one."""


class EmptyResponseError(ProviderError):
    """Provider answered without usable text."""


class AllProvidersFailedError(Exception):
    """No provider produced text for the prompt."""

    def __init__(self, message, last_error=None, attempted=None):
        super().__init__(message)
        self.last_error = last_error
        self.attempted = list(attempted or [])

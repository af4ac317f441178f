"""Engine exceptions."""


class SEOScopeError(Exception):
    """Base class for analysis errors."""


class FetchError(SEOScopeError):
    """Page content could not be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class AnalysisFailed(SEOScopeError):
    """An analysis run did not produce a result."""

    MESSAGE = "Failed to analyze website. Please check the URL and try again."

    def __init__(self, url: str, message: str = MESSAGE):
        self.url = url
        super().__init__(message)

"""Error types raised by the generation stages.

Transport failures (`requests.exceptions.RequestException`) are not wrapped
and reach callers unchanged.
"""


class GenerationError(RuntimeError):
    """Base class for pipeline failures."""


class MissingCredentialsError(GenerationError):
    """A required API key could not be resolved."""


class ApiResponseError(GenerationError):
    """An endpoint answered with a non-success status or an unusable body.

    Attributes:
        stage: Human-readable stage label (for example "Image generation").
        status_code: HTTP status returned by the endpoint.
        body: Response text or extracted provider error message.
    """

    def __init__(self, stage: str, status_code: int, body: str):
        self.stage = stage
        self.status_code = status_code
        self.body = body
        super().__init__(f"{stage} failed: {status_code} - {body}")

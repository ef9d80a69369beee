class NetworkError(ConnectionError):
    """The HTTP exchange with kanjiapi.dev could not be completed."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Cannot reach {url}: {reason}")
        self.url = url


class DeserializationError(ValueError):
    """The response body does not match the shape expected for the request."""

    def __init__(self, kind, detail: str):
        super().__init__(f"Could not read {kind.value} from response: {detail}")
        self.kind = kind


class TypeMismatchError(TypeError):
    """A result was narrowed to, or built with, a payload type that does not fit its tag."""

    def __init__(self, expected, actual):
        found = getattr(actual, "value", actual)
        super().__init__(f"Expected {expected.value}, got {found}")
        self.expected = expected
        self.actual = actual

from typing import List


class LinkValidationError(ValueError):
    """Submitted url failed one or more validation rules; nothing was stored."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class LinkNotFound(LookupError):
    """No stored link matches the requested short code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"No link for short code {code!r}")

# re-export common schemas for simpler imports
from .link import LinkCreateRequest, LinkInfoResponse

__all__ = [
    "LinkCreateRequest",
    "LinkInfoResponse",
]

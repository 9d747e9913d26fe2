from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedContract:
    contract_id: int
    filename: str
    media_type: str
    content: bytes

"""
Payloads sent to Kinesis and S3.

Both are single-field JSON objects encoded compactly as UTF-8 bytes.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict

_SEPARATORS = (',', ':')


@dataclass(frozen=True)
class KinesisRecord:
    """Record written to the Kinesis stream. An empty name is omitted."""

    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name} if self.name else {}

    def to_json_bytes(self) -> bytes:
        return json.dumps(self.to_dict(), separators=_SEPARATORS, ensure_ascii=False).encode('utf-8')

    @classmethod
    def from_json_bytes(cls, data: bytes) -> "KinesisRecord":
        return cls(name=json.loads(data.decode('utf-8')).get("name", ""))


@dataclass(frozen=True)
class S3Object:
    """Object body uploaded to S3. The name is always written."""

    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}

    def to_json_bytes(self) -> bytes:
        return json.dumps(self.to_dict(), separators=_SEPARATORS, ensure_ascii=False).encode('utf-8')

    @classmethod
    def from_json_bytes(cls, data: bytes) -> "S3Object":
        return cls(name=json.loads(data.decode('utf-8')).get("name", ""))

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class ChatMessage:
    """A single message in the shared chat room"""
    id: str
    author: str
    text: str
    timestamp: int  # milliseconds since epoch

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted/wire form; the author travels as ``username``"""
        return {
            "id": self.id,
            "username": self.author,
            "text": self.text,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChatMessage":
        """Create ChatMessage from a persisted entry"""
        return cls(
            id=data["id"],
            author=data["username"],
            text=data["text"],
            timestamp=int(data["timestamp"]),
        )

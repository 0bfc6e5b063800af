# models/user.py

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any

from utils.datetime_utils import now_iso

@dataclass
class User:
    """Session user record, owned by the authentication front end"""
    id: str
    email: str
    name: str
    avatar: Optional[str] = None
    created_at: str = field(default_factory=now_iso)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["createdAt"] = data.pop("created_at")
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            email=data.get("email", ""),
            name=data.get("name", ""),
            avatar=data.get("avatar"),
            created_at=data.get("createdAt") or now_iso(),
        )

# models/place.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from utils.money import parse_int, parse_number

@dataclass
class Place:
    id: str
    name: str
    type: str
    rating: float
    description: str
    image_url: str = ""
    # 0 (free) .. 4 (very expensive); None when the source has no data
    price_level: Optional[int] = None
    vicinity: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Place":
        # the backend is not trusted to send numbers; junk counts as missing
        price_level = d.get("price_level")
        if price_level is not None:
            price_level = parse_int(price_level, default=-1)
            if price_level < 0:
                price_level = None
        return cls(
            id=str(d.get("id") or d.get("place_id") or ""),
            name=str(d.get("name") or ""),
            type=str(d.get("type") or "tourist attraction"),
            rating=parse_number(d.get("rating")),
            description=str(d.get("description") or ""),
            image_url=str(d.get("imageUrl") or d.get("image_url") or ""),
            price_level=int(price_level) if price_level is not None else None,
            vicinity=d.get("vicinity"),
        )

"""Location heuristics over free text

The parsed location is less reliable than the sequence heading; it is only
used when the heading does not name a place.
"""

from __future__ import annotations

from typing import Iterable, List

from ..screenplay.screenplay_models import SequenceType
from .keyword_matching import find_labels

INDOOR_PLACES = {
    "warehouse": ["warehouse", "warehouses"],
    "kitchen": ["kitchen"],
    "bedroom": ["bedroom"],
    "living room": ["living room", "lounge"],
    "bathroom": ["bathroom"],
    "office": ["office"],
    "corridor": ["corridor", "hallway"],
    "bar": ["bar", "pub", "saloon", "tavern"],
    "restaurant": ["restaurant", "diner", "cafe"],
    "church": ["church", "chapel", "cathedral"],
    "hospital": ["hospital", "ward"],
    "classroom": ["classroom"],
    "basement": ["basement", "cellar"],
    "attic": ["attic"],
    "apartment": ["apartment", "flat"],
    "car": ["car", "taxi", "truck"],
    "train": ["train", "subway", "metro"],
    "spaceship": ["spaceship", "starship", "cockpit"],
}

OUTDOOR_PLACES = {
    "street": ["street", "streets", "avenue", "road"],
    "alley": ["alley", "alleyway"],
    "forest": ["forest", "woods", "jungle"],
    "beach": ["beach", "shore", "coast"],
    "desert": ["desert", "dunes"],
    "mountain": ["mountain", "mountains", "cliff"],
    "field": ["field", "meadow", "farm"],
    "park": ["park", "garden"],
    "rooftop": ["rooftop", "roof"],
    "harbor": ["harbor", "harbour", "dock", "pier"],
    "city": ["city", "downtown"],
    "parking lot": ["parking lot"],
}

INDOOR_MARKERS = ["inside", "indoors", "interior", "room", "upstairs", "downstairs", "ceiling"]
OUTDOOR_MARKERS = ["outside", "outdoors", "exterior", "sky", "open air"]


async def parse_locations(texts: Iterable[str]) -> List[str]:
    """Places mentioned in the texts, indoor places first"""
    texts = list(texts)
    return find_labels(texts, INDOOR_PLACES) + find_labels(texts, OUTDOOR_PLACES)


async def parse_location_type(texts: Iterable[str]) -> SequenceType:
    """Guess interior/exterior from place names and explicit markers"""
    texts = list(texts)
    indoor = bool(find_labels(texts, INDOOR_PLACES) or find_labels(texts, {"indoor": INDOOR_MARKERS}))
    outdoor = bool(find_labels(texts, OUTDOOR_PLACES) or find_labels(texts, {"outdoor": OUTDOOR_MARKERS}))

    if indoor and outdoor:
        return SequenceType.INTERIOR_EXTERIOR
    if indoor:
        return SequenceType.INTERIOR
    if outdoor:
        return SequenceType.EXTERIOR
    return SequenceType.UNKNOWN

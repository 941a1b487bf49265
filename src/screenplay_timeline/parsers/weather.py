from __future__ import annotations

from typing import Iterable, List

from .keyword_matching import find_labels

WEATHER = {
    "rain": ["rain", "rains", "raining", "rainy", "downpour", "drizzle"],
    "storm": ["storm", "stormy", "thunderstorm", "lightning", "thunder"],
    "snow": ["snow", "snowing", "snowy", "blizzard", "snowflakes"],
    "fog": ["fog", "foggy", "mist", "misty", "haze"],
    "wind": ["wind", "windy", "gust", "gusts", "breeze"],
    "sunny": ["sunny", "clear sky", "cloudless"],
    "cloudy": ["cloudy", "overcast", "clouds"],
    "heat": ["heatwave", "scorching", "sweltering"],
    "hail": ["hail", "hailstones"],
}


async def parse_weather(texts: Iterable[str]) -> List[str]:
    return find_labels(texts, WEATHER)

from __future__ import annotations

from typing import Iterable, List

from .keyword_matching import find_labels

LIGHTS = {
    "dark": ["dark", "darkness", "pitch black", "unlit"],
    "night": ["night", "nighttime", "midnight"],
    "dim light": ["dim", "dimly", "gloomy", "half-light"],
    "bright light": ["bright", "brightly", "blinding"],
    "sunlight": ["sunlight", "sunny", "sunshine", "sunbeam", "sunbeams"],
    "moonlight": ["moonlight", "moonlit"],
    "candlelight": ["candle", "candles", "candlelight"],
    "firelight": ["fire", "fireplace", "campfire", "torch", "torches"],
    "neon lights": ["neon"],
    "flashlight": ["flashlight", "flashlights"],
    "sunset": ["sunset", "dusk", "twilight"],
    "sunrise": ["sunrise", "dawn"],
    "shadows": ["shadow", "shadows", "silhouette"],
    "flickering light": ["flicker", "flickers", "flickering"],
}


async def parse_lights(texts: Iterable[str]) -> List[str]:
    return find_labels(texts, LIGHTS)

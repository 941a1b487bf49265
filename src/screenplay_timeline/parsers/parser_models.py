"""Data models returned by the sub-parsers"""

from typing import List, Optional
from pydantic import BaseModel


class CategoryPrompts(BaseModel):
    """Prompt fragments added to every segment of the matching category"""
    style: List[str] = []
    camera: List[str] = []
    lighting: List[str] = []
    weather: List[str] = []
    sound: List[str] = []
    music: List[str] = []
    era: List[str] = []


class Era(BaseModel):
    """Time period of a movie"""
    label: str
    keywords: List[str] = []
    prompts: CategoryPrompts = CategoryPrompts()


class Genre(BaseModel):
    """Movie genre, inferred from vocabulary"""
    label: str
    keywords: List[str] = []
    prompts: CategoryPrompts = CategoryPrompts()


class NameAnalysis(BaseModel):
    """Demographics guessed from a character name"""
    name: str
    age: Optional[int] = None
    gender: str = "person"
    region: str = ""

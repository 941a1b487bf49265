import asyncio

from screenplay_timeline.analysis.entity_registry import EntityRegistry
from screenplay_timeline.parsers import NameAnalysis, ParserSuite
from screenplay_timeline.screenplay import Sequence
from screenplay_timeline.timeline import EntityCategory
from screenplay_timeline.utils.config import EntityConfig


def test_character_is_created_once():
    registry = EntityRegistry(ParserSuite())
    first = Sequence(full_text="INT. BAR - NIGHT\nJOHN drinks.")
    second = Sequence(full_text="EXT. STREET - DAY\nJOHN walks.")

    john = asyncio.run(registry.register_character("JOHN", first))
    again = asyncio.run(registry.register_character("JOHN", second))

    assert again is john
    assert registry.entities_by_screenplay_label["JOHN"] is john
    assert registry.entities_by_id == {john.id: john}
    assert john.category == EntityCategory.CHARACTER
    assert john.label == "John"
    assert john.description == "John is a male"
    assert john.region == "american"


def test_name_analysis_runs_only_on_first_sighting():
    calls = []

    async def fake_analyze_name(name):
        calls.append(name)
        return NameAnalysis(name="Zed", age=41, gender="male", region="")

    registry = EntityRegistry(ParserSuite(analyze_name=fake_analyze_name), EntityConfig(default_region="british"))
    sequence = Sequence(full_text="text")

    for _ in range(3):
        entity = asyncio.run(registry.register_character("ZED", sequence))

    assert calls == ["ZED"]
    assert entity.age == 41
    assert entity.region == "british"


def test_location_entity():
    registry = EntityRegistry(ParserSuite())
    warehouse = registry.register_location("WAREHOUSE", Sequence(full_text="a"))

    assert warehouse.category == EntityCategory.LOCATION
    assert warehouse.label == "WAREHOUSE"
    assert warehouse.description == ""
    assert warehouse.gender == "object"
    assert registry.register_location("WAREHOUSE", Sequence(full_text="b")) is warehouse
    assert len(registry.entities_by_id) == 1


def test_accumulator_deduplicates_sequences_by_content():
    registry = EntityRegistry(ParserSuite())
    a = Sequence(full_text="same text")
    a_copy = Sequence(full_text="same text")
    b = Sequence(full_text="other text")

    registry.register_location("DOCKS", a)
    first_id = registry.assets_by_label["DOCKS"].id
    registry.register_location("DOCKS", a_copy)
    registry.register_location("DOCKS", b)

    asset = registry.assets_by_label["DOCKS"]
    assert asset.occurrences == 3
    assert [s.full_text for s in asset.sequences] == ["same text", "other text"]
    assert asset.id == first_id
    assert asset.category == EntityCategory.LOCATION

# osm2lanes

A library for reading OpenStreetMap way tags into typed values and for
describing a road lane by lane.

## Modules

- `osm2lanes.tags`: `Tags`, a map of OSM tags always ordered by key, with
  `TagKey` for building `:`-separated keys such as `lanes:forward`.
  Tags can be read from `key=value` lines (`Tags.parse`), pairs
  (`Tags.from_pairs`), a dict or JSON, and written back with `str()`,
  `to_list()`, `to_dict()` and `to_json()`. Repeated keys raise
  `DuplicateKeyError`; a line without `=` raises `MissingEqualsError`.
- `osm2lanes.keys`: constants for common keys (`HIGHWAY`, `LANES`,
  `LANES_FORWARD`, `LIT`, …).
- `osm2lanes.tag_values`: the enums `Access`, `Lit`, `TrackType` and
  `Smoothness`, with `parse_tag` and `parse_default_tag` to read them from
  tags; an unknown value raises `TagError`.
- `osm2lanes.highway`: `Highway`, `HighwayType`, `HighwayImportance`,
  `NonTravel` and `Lifecycle`, read from `highway=*` and its
  `construction=*` / `proposed=*` lifecycle tags; problems raise
  `HighwayError`.
- `osm2lanes.schemes`: `Schemes.from_tags` reads name, ref, highway, lit,
  tracktype and smoothness at once, keeping any errors in `errors`.
- `osm2lanes.lane_access`: `LaneDependentAccess.from_tags` reads
  `|`-separated `*:lanes` values together with their `:forward` and
  `:backward` variants and raises `ConflictingLaneAccessError` when they
  disagree.
- `osm2lanes.metric`: `Metre` lengths and `Speed` values in kph, mph or
  knots, parsed from OSM text and converted to and from JSON.
- `osm2lanes.road`: the road model: `Road` holding `TravelLane`,
  `ParkingLane`, `ShoulderLane` and `SeparatorLane` objects, with
  `Marking`/`Markings`, `Direction`, `Designated`, `Color`, `Style`,
  `Semantic` and `AccessByType`. Roads and lanes convert to and from plain
  dicts (`to_dict`, `Road.from_dict`, `lane_from_dict`).
- `osm2lanes.locale`: `Locale`, built with `Locale.builder()`, holding a
  `Country` and a `DrivingSide`, and giving defaults such as lane widths,
  centre-line colour and width, and whether a highway type has split lanes
  or shoulders.
- `osm2lanes.overpass`: `get_tags`, `get_way` and `get_nearby` fetch way
  tags, geometry and locale from the Overpass API over HTTP; failures raise
  `OverpassError`, `EmptyResponseError` or `MalformedResponseError`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Tags:

```python
from osm2lanes.tags import Tags, TagKey

tags = Tags.parse("lanes=2\nhighway=primary")
tags.get("highway")                  # "primary"
str(tags)                            # "highway=primary\nlanes=2"
TagKey("lanes") + "forward"          # TagKey('lanes:forward')
```

Highways:

```python
from osm2lanes.highway import Highway

highway = Highway.from_tags(Tags.parse("highway=construction\nconstruction=secondary"))
highway.is_construction()            # True
str(highway)                         # "secondary"
```

Locales:

```python
from osm2lanes.locale import Locale, DrivingSide

locale = Locale.builder().driving_side(DrivingSide.LEFT).iso_3166("GB").build()
locale.separator_motor_width()       # Metre(value=0.1)
```

Speeds:

```python
from osm2lanes.metric import Speed

speed = Speed.parse("30 mph")
str(speed)                           # "30 mph"
speed.to_json()                      # '{"unit":"mph","value":30.0}'
```

Overpass (needs network access):

```python
from osm2lanes.overpass import get_way

tags, line, locale = get_way(62176050)
```

## What it does not do

The package does not compute the lanes of a road from its tags, nor tags
from lanes: it provides the tag readers and the `Road` model such a
conversion works with, but no conversion itself. It has no command-line
program, no web interface and no drawing of roads.
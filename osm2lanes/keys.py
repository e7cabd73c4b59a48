"""Well known OSM tag keys."""

from osm2lanes.tags import TagKey

NAME = TagKey("name")
REF = TagKey("ref")

HIGHWAY = TagKey("highway")
CONSTRUCTION = TagKey("construction")
PROPOSED = TagKey("proposed")
LIFECYCLE = (HIGHWAY, CONSTRUCTION, PROPOSED)

ONEWAY = TagKey("oneway")

LIT = TagKey("lit")

TRACK_TYPE = TagKey("tracktype")
SMOOTHNESS = TagKey("smoothness")

LANES = TagKey("lanes")
LANES_FORWARD = LANES + "forward"
LANES_BACKWARD = LANES + "backward"
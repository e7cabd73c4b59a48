import pytest

from osm2lanes.lane_access import (
    ConflictingLaneAccessError,
    LaneAccess,
    LaneDependentAccess,
    LaneDependentAccessError,
    UnknownLaneAccessError,
)
from osm2lanes.tags import TagKey, Tags

KEY = TagKey("access:lanes")
FORWARD = "access:lanes:forward"
BACKWARD = "access:lanes:backward"


def test_untagged_is_none():
    assert LaneDependentAccess.from_tags(Tags(), KEY) is None


def test_left_to_right():
    tags = Tags.from_pair(KEY, "yes|no|designated")
    access = LaneDependentAccess.from_tags(tags, KEY)
    assert access == LaneDependentAccess(
        left_to_right=(LaneAccess.YES, LaneAccess.NO, LaneAccess.DESIGNATED)
    )


def test_empty_entry_is_none_access():
    access = LaneDependentAccess.from_tags(Tags.from_pair(KEY, "yes||no"), KEY)
    assert access.left_to_right == (LaneAccess.YES, LaneAccess.NONE, LaneAccess.NO)


def test_forward_only():
    access = LaneDependentAccess.from_tags(Tags.from_pair(FORWARD, "no|yes"), KEY)
    assert access == LaneDependentAccess(forward=(LaneAccess.NO, LaneAccess.YES))


def test_backward_only():
    access = LaneDependentAccess.from_tags(Tags.from_pair(BACKWARD, "designated"), "access:lanes")
    assert access == LaneDependentAccess(backward=(LaneAccess.DESIGNATED,))


def test_forward_backward_consistent_with_total():
    tags = Tags.from_pairs(
        [(KEY, "yes|no|designated"), (FORWARD, "yes"), (BACKWARD, "designated|no")]
    )
    access = LaneDependentAccess.from_tags(tags, KEY)
    assert access.forward == (LaneAccess.YES,)
    assert access.backward == (LaneAccess.DESIGNATED, LaneAccess.NO)
    assert access.left_to_right is None


def test_forward_backward_without_total():
    tags = Tags.from_pairs([(FORWARD, "yes"), (BACKWARD, "no")])
    access = LaneDependentAccess.from_tags(tags, KEY)
    assert access == LaneDependentAccess(forward=(LaneAccess.YES,), backward=(LaneAccess.NO,))


def test_length_conflict():
    tags = Tags.from_pairs([(KEY, "yes|no"), (FORWARD, "yes"), (BACKWARD, "no|no")])
    with pytest.raises(ConflictingLaneAccessError) as info:
        LaneDependentAccess.from_tags(tags, KEY)
    assert str(info.value) == "conflicting tags"


def test_order_conflict():
    tags = Tags.from_pairs([(KEY, "yes|no"), (FORWARD, "no"), (BACKWARD, "yes")])
    with pytest.raises(ConflictingLaneAccessError):
        LaneDependentAccess.from_tags(tags, KEY)


def test_total_with_matching_forward_prefix():
    tags = Tags.from_pairs([(KEY, "yes|no|no"), (FORWARD, "yes|no")])
    access = LaneDependentAccess.from_tags(tags, KEY)
    assert access == LaneDependentAccess(
        left_to_right=(LaneAccess.YES, LaneAccess.NO, LaneAccess.NO)
    )


def test_total_with_mismatching_forward():
    tags = Tags.from_pairs([(KEY, "yes|no"), (FORWARD, "no")])
    with pytest.raises(ConflictingLaneAccessError):
        LaneDependentAccess.from_tags(tags, KEY)


def test_total_with_backward_suffix():
    tags = Tags.from_pairs([(KEY, "yes|no|designated"), (BACKWARD, "no|designated")])
    access = LaneDependentAccess.from_tags(tags, KEY)
    assert access.left_to_right[-1] is LaneAccess.DESIGNATED
    bad = Tags.from_pairs([(KEY, "yes|no|designated"), (BACKWARD, "yes")])
    with pytest.raises(ConflictingLaneAccessError):
        LaneDependentAccess.from_tags(bad, KEY)


def test_unknown_value():
    with pytest.raises(UnknownLaneAccessError) as info:
        LaneDependentAccess.from_tags(Tags.from_pair(KEY, "yes|maybe"), KEY)
    assert info.value.value == "yes|maybe"
    assert isinstance(info.value, LaneDependentAccessError)
    assert str(info.value).endswith("=yes|maybe")
from ctxlog import merge_fields


def test_overlay_wins_on_shared_keys():
    a = {"x": 1, "y": 2}
    b = {"y": 3, "z": 4}
    assert merge_fields(a, b) == {"x": 1, "y": 3, "z": 4}


def test_inputs_not_mutated():
    a = {"x": 1}
    b = {"x": 2, "y": 3}
    merged = merge_fields(a, b)
    merged["w"] = 0
    assert a == {"x": 1}
    assert b == {"x": 2, "y": 3}
    assert merged is not a and merged is not b


def test_empty_merges_are_none():
    assert merge_fields(None, None) is None
    assert merge_fields({}, None) is None
    assert merge_fields(None, {}) is None


def test_single_side_is_copied():
    a = {"x": 1}
    merged = merge_fields(a, None)
    assert merged == a
    assert merged is not a

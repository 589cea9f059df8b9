import pytest

from scenegraph3d.uniform_layout import STD140_ALIGN, UniformLayout, std140_layout


def test_empty_block():
    layout = std140_layout([])
    assert layout == UniformLayout({}, {}, 0)


def test_single_matrix():
    layout = std140_layout([("model", 64)])
    assert layout.offsets == {"model": 0}
    assert layout.sizes == {"model": 64}
    assert layout.total_size == 64


def test_vec4_then_float_starts_new_row():
    layout = std140_layout([("color", 16), ("intensity", 4)])
    assert layout.offsets["color"] == 0
    assert layout.offsets["intensity"] == 16
    assert layout.total_size == 32


def test_small_members_pack_into_one_row():
    layout = std140_layout([("a", 4), ("b", 4)])
    assert layout.offsets["a"] == 0
    assert layout.offsets["b"] == 4
    assert layout.total_size == STD140_ALIGN


def test_mapping_input_matches_pairs():
    pairs = [("a", 4), ("b", 12), ("c", 64), ("d", 8)]
    assert std140_layout(dict(pairs)) == std140_layout(pairs)


@pytest.mark.parametrize(
    "sizes",
    [[4], [4, 4, 4, 4], [12, 4, 16], [8, 64, 4, 12], [36, 4], [4, 48, 8, 8, 8]],
)
def test_invariants(sizes):
    members = [(f"m{i}", s) for i, s in enumerate(sizes)]
    layout = std140_layout(members)
    assert layout.total_size % STD140_ALIGN == 0
    offsets = [layout.offsets[name] for name, _ in members]
    assert offsets == sorted(offsets)
    assert offsets[0] == 0
    for (name, size), nxt in zip(members, offsets[1:] + [layout.total_size]):
        assert layout.offsets[name] + size <= nxt
    assert layout.sizes == dict(members)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        std140_layout([("bad", -4)])
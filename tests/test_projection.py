import pytest

from noemacore.projection import NoemaMode, Projection, stimulus_hash


def test_hash_is_deterministic_and_64_bit():
    first = stimulus_hash(b"novelty")
    assert first == stimulus_hash(b"novelty")
    assert 0 <= first < 2**64


def test_hash_of_str_matches_utf8_bytes():
    assert stimulus_hash("привет") == stimulus_hash("привет".encode("utf-8"))


def test_hash_distinguishes_inputs():
    assert len({stimulus_hash(s) for s in (b"", b"a", b"b", b"ab", b"ba")}) == 5


def test_new_projection_is_zeroed():
    projection = Projection()
    assert (projection.hash_state, projection.energy_level, projection.stability) == (0, 0, 0)


def test_absorb_updates_state():
    projection = Projection()
    assert projection.absorb(b"stimulus") is True
    assert projection.hash_state == stimulus_hash(b"stimulus")
    assert projection.energy_level == 1
    assert projection.stability == 0


def test_absorb_wraps_hash_state():
    h = stimulus_hash(b"x")
    projection = Projection(hash_state=2**64 - h + 5)
    projection.absorb(b"x")
    assert projection.hash_state == 5


def test_absorb_wraps_energy_level():
    projection = Projection(energy_level=2**32 - 1)
    projection.absorb(b"x")
    assert projection.energy_level == 0


def test_fast_stabilization_step_and_saturation():
    projection = Projection()
    projection.stabilize(NoemaMode.NOEMA_FAST)
    assert projection.stability == 10
    for _ in range(40):
        projection.stabilize(NoemaMode.NOEMA_FAST)
    assert projection.stability == 255


def test_slow_stabilization_uses_energy():
    projection = Projection(energy_level=1000)
    projection.stabilize(NoemaMode.NOEMA_SLOW)
    assert projection.stability == 10


def test_slow_stabilization_truncates_energy_to_16_bits():
    projection = Projection(energy_level=70000)
    projection.stabilize(NoemaMode.NOEMA_SLOW)
    assert projection.stability == 44


def test_slow_stabilization_saturates():
    projection = Projection(energy_level=60000, stability=250)
    projection.stabilize(NoemaMode.NOEMA_SLOW)
    assert projection.stability == 255


@pytest.mark.parametrize("energy", [0, 99])
def test_slow_stabilization_below_threshold_is_noop(energy):
    projection = Projection(energy_level=energy, stability=7)
    projection.stabilize(NoemaMode.NOEMA_SLOW)
    assert projection.stability == 7


def test_text_form():
    assert str(Projection()) == "Projection { hash_state: 0, energy_level: 0, stability: 0 }"
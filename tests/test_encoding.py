"""
Tests for the encoding module

Run: pytest tests/test_encoding.py -v
"""

import numpy as np
import pytest

from medinfer.encoding import SymptomIndex, VectorEncoder, parse_convention_id
from medinfer.exceptions import InvalidSymptomError, SymptomOutOfRangeError


def test_parse_convention_id():
    assert parse_convention_id("symptom_1") == 1
    assert parse_convention_id("symptom_377") == 377
    assert parse_convention_id("symptom_") is None
    assert parse_convention_id("symptom_x") is None
    assert parse_convention_id("fever") is None
    assert parse_convention_id("sx_4", prefix="sx_") == 4


def test_convention_index():
    index = SymptomIndex.from_convention(377)

    assert index.size == 377
    assert index.index_of("symptom_1") == 0
    assert index.index_of("symptom_377") == 376
    assert index.index_of("symptom_378") is None
    assert index.index_of("symptom_0") is None
    assert index.id_at(376) == "symptom_377"
    assert index.id_at(377) is None


def test_check_range():
    index = SymptomIndex.from_convention(10)

    index.check_range("symptom_10")
    index.check_range("fever")          # not a convention id: passes

    with pytest.raises(SymptomOutOfRangeError):
        index.check_range("symptom_11")
    with pytest.raises(SymptomOutOfRangeError):
        index.check_range("symptom_0")


def test_validate_convention():
    index = SymptomIndex.from_convention(10)

    assert index.validate_convention("symptom_3") == 3

    with pytest.raises(InvalidSymptomError):
        index.validate_convention("fever")
    with pytest.raises(InvalidSymptomError):
        index.validate_convention(3)
    with pytest.raises(SymptomOutOfRangeError):
        index.validate_convention("symptom_11")


def test_index_save_load(tmp_path):
    index = SymptomIndex(["fever", "cough", "rash"], version="v2", names=["Fever", "Cough", "Rash"])

    path = tmp_path / "index.json"
    index.save(str(path))
    loaded = SymptomIndex.load(str(path))

    assert loaded.symptom_ids == ["fever", "cough", "rash"]
    assert loaded.version == "v2"
    assert loaded.name_of("cough") == "Cough"
    assert loaded.name_of("nope") is None


def test_index_rejects_duplicates():
    with pytest.raises(ValueError):
        SymptomIndex(["a", "b", "a"])
    with pytest.raises(ValueError):
        SymptomIndex(["a", "b"], names=["A"])


def test_encode():
    """symptom_<n> sets slot n-1"""
    encoder = VectorEncoder(SymptomIndex.from_convention(377))

    vector = encoder.encode({"symptom_1", "symptom_5", "symptom_377"})

    assert vector.shape == (377,)
    assert vector.dtype == np.float32
    assert vector.sum() == 3.0
    assert vector[0] == vector[4] == vector[376] == 1.0

    print(f"✓ Encoded {int(vector.sum())} symptoms into {vector.shape}")


def test_encode_drops_unknown():
    """Unknown and out-of-range ids are dropped and reported, never raised"""
    encoder = VectorEncoder(SymptomIndex.from_convention(377))

    result = encoder.encode_with_report(["symptom_2", "symptom_999", "fever", "symptom_2"])

    assert result.encoded == ("symptom_2",)
    assert result.dropped == ("fever", "symptom_999")
    assert result.active_count == 1
    assert result.vector.sum() == 1.0


def test_encode_deterministic():
    encoder = VectorEncoder(SymptomIndex.from_convention(50))
    selection = ["symptom_7", "symptom_3", "symptom_50"]

    first = encoder.encode(selection)
    second = encoder.encode(list(reversed(selection)))

    assert np.array_equal(first, second)


def test_decode():
    encoder = VectorEncoder(SymptomIndex.from_convention(20))
    selection = {"symptom_2", "symptom_11", "symptom_20"}

    decoded = encoder.decode(encoder.encode(selection))

    assert set(decoded) == selection
    assert encoder.decode(np.zeros(20)) == []

import pytest

from scouting_search.db.vector import cosine_distance, decode_vector, encode_vector


class TestVector:
    def test_encode_decode(self) -> None:
        assert decode_vector(encode_vector([0.5, -1.0, 2.0])) == (0.5, -1.0, 2.0)

    def test_identical_vectors(self) -> None:
        v = encode_vector([1.0, 2.0, 3.0])
        assert cosine_distance(v, v) == pytest.approx(0.0, abs=1e-6)

    def test_opposite_vectors(self) -> None:
        assert cosine_distance(encode_vector([1.0, 0.0]), encode_vector([-1.0, 0.0])) == pytest.approx(2.0)

    def test_missing_or_zero_vectors_are_null(self) -> None:
        assert cosine_distance(None, encode_vector([1.0])) is None
        assert cosine_distance(encode_vector([0.0, 0.0]), encode_vector([1.0, 0.0])) is None

    def test_mismatched_lengths_raise(self) -> None:
        with pytest.raises(ValueError, match="dimensions differ"):
            cosine_distance(encode_vector([1.0, 0.0]), encode_vector([1.0]))

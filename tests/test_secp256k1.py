import pytest

from vanitymnemonic.secp256k1 import (
    G,
    N,
    P,
    compressed,
    point_add,
    public_point,
    scalar_mult,
)


def test_public_point_of_one_is_generator():
    assert public_point(1) == G


def test_order_times_generator_is_infinity():
    assert scalar_mult(N, G) is None


def test_infinity_is_identity():
    assert point_add(G, None) == G
    assert point_add(None, G) == G


def test_point_plus_negation_is_infinity():
    assert point_add(G, (G[0], P - G[1])) is None


def test_order_minus_one_is_negation():
    assert scalar_mult(N - 1, G) == (G[0], P - G[1])


def test_doubling_matches_scalar_two():
    assert point_add(G, G) == scalar_mult(2, G)


@pytest.mark.parametrize("a,b", [(1, 2), (7, 11), (12345, 67890), (N - 5, 3)])
def test_scalar_mult_is_linear(a, b):
    left = scalar_mult(a + b, G)
    right = point_add(scalar_mult(a, G), scalar_mult(b, G))
    assert left == right


@pytest.mark.parametrize("k", [1, 2, 3, 1000, 2**200 + 17, N - 1])
def test_points_are_on_curve(k):
    x, y = public_point(k)
    assert (y * y - x * x * x - 7) % P == 0


def test_compressed_generator():
    assert (
        compressed(G).hex()
        == "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )


@pytest.mark.parametrize("k", [2, 5, 99, 2**100])
def test_compressed_layout(k):
    point = public_point(k)
    encoded = compressed(point)
    assert len(encoded) == 33
    assert encoded[0] == 2 + (point[1] & 1)
    assert int.from_bytes(encoded[1:], "big") == point[0]


@pytest.mark.parametrize("secret", [0, N, N + 1, -1])
def test_public_point_rejects_out_of_range(secret):
    with pytest.raises(ValueError):
        public_point(secret)


def test_compressed_rejects_infinity():
    with pytest.raises(ValueError):
        compressed(None)
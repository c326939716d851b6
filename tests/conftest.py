import pytest

# (x, y, z) triples covering sign changes, fractions and large magnitudes
VECTOR_SAMPLES = [
    (0.0, 0.0, 0.0),
    (1.0, 2.0, 3.0),
    (0.0, 1.0, -1.0),
    (-2.5, 0.125, 7.75),
    (0.1, 0.2, 0.3),
    (1e10, -1e-10, 3.0),
]

SCALAR_SAMPLES = [0.0, 1.0, -2.0, 0.5, 3.25]


@pytest.fixture(params=VECTOR_SAMPLES, ids=repr)
def components(request):
    return request.param


@pytest.fixture(params=SCALAR_SAMPLES, ids=repr)
def scalar(request):
    return request.param

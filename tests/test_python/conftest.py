import pytest

DTYPES = ["f32", "f64", "i32", "i64"]


def get_bounds_for_dtype(bounds, dtype):
    """Cast (left, top, width, height) to ints when dtype is integral."""
    if dtype.startswith("i"):
        return tuple(map(int, bounds))
    return tuple(map(float, bounds))


@pytest.fixture(params=DTYPES)
def dtype(request):
    return request.param


@pytest.fixture
def bounds(dtype):
    return get_bounds_for_dtype((0, 0, 100, 100), dtype)


@pytest.fixture
def coord(dtype):
    """Return a converter building an (x, y) tuple in the dtype's scalar type."""
    scalar = int if dtype.startswith("i") else float

    def convert(x, y):
        return (scalar(x), scalar(y))

    return convert

def assert_close(actual, expected, tol):
    """Channelwise ``abs(a - e) < tol`` for float triples."""
    for a, e in zip(actual, expected):
        assert abs(float(a) - float(e)) < tol, f"{tuple(actual)} != {tuple(expected)} (tol {tol})"

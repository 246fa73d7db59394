"""End-to-end chains across both containers."""
import fallible
from fallible import attempt, err, none, ok, some


def test_chained_maps_on_some():
    assert some(5).map(lambda v: v * 2).map(lambda v: v * 10).unwrap_or(0) == 100


def test_chained_map_on_none_uses_default():
    assert none().map(lambda v: v * 2).unwrap_or(0) == 0


def test_err_skips_map_and_maps_error():
    assert err(123).map(lambda v: v + 1).unwrap_or("default") == "default"
    assert err(123).map_err(lambda e: e + 1).unwrap_err() == 124


def test_and_then_validation():
    result = ok("abc").and_then(lambda v: ok(True) if len(v) == 3 else err("bad"))
    assert result.unwrap() is True


def test_attempt_captures_raised_error():
    boom = Exception("boom")

    def explode():
        raise boom

    assert attempt(explode).unwrap_err() is boom


def test_zip_pairs_values():
    assert some("x").zip(some("y")).unwrap() == ("x", "y")
    assert some("x").zip(none()).is_none()


def test_parse_pipeline():
    """Convert exceptions at the boundary, then stay in Result land."""

    def parse_port(raw):
        return (
            attempt(lambda: int(raw))
            .map_err(lambda e: f"not a number: {raw}")
            .and_then(lambda port: ok(port) if 0 < port < 65536 else err(f"out of range: {port}"))
        )

    assert parse_port("8080") == ok(8080)
    assert parse_port("http") == err("not a number: http")
    assert parse_port("70000").unwrap_or(80) == 80
    assert parse_port("443").ok().filter(lambda p: p == 443).is_some()


def test_package_exports():
    for name in fallible.__all__:
        assert hasattr(fallible, name), name

"""Smoke tests for the public import surface."""


def test_package_exports():
    import gymnotes_parser

    for name in gymnotes_parser.__all__:
        assert hasattr(gymnotes_parser, name), name


def test_top_level_helpers():
    from gymnotes_parser import parse_line, parse_plan, validate_entry

    entry = parse_line("3x10 squat @100kg")
    assert validate_entry(entry).ok
    assert parse_plan("3x10 squat").days[0].name == "Day 1"


def test_app_imports():
    from gymnotes_parser.main import app

    paths = {getattr(route, "path", None) for route in app.routes}
    assert {"/parse/line", "/parse/plan", "/exercises", "/exercises/categories"} <= paths

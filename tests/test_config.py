from tour_solver.config import Settings


def test_settings_defaults(monkeypatch):
    for name in ("TOUR_MAX_POINTS", "TOUR_REPORT_IMPROVEMENTS", "TOUR_GRID_LOWER", "TOUR_GRID_UPPER"):
        monkeypatch.delenv(name, raising=False)
    current = Settings(_env_file=None)

    assert current.api_prefix == "/api"
    assert current.report_improvements is True
    assert current.max_points == 9
    assert (current.grid_lower, current.grid_upper) == (-1.0, 1.0)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("TOUR_MAX_POINTS", "5")
    monkeypatch.setenv("TOUR_REPORT_IMPROVEMENTS", "false")
    monkeypatch.setenv("TOUR_LOG_LEVEL", "debug")
    current = Settings(_env_file=None)

    assert current.max_points == 5
    assert current.report_improvements is False
    assert current.log_level == "DEBUG"


def test_allowed_origins_accept_comma_separated_values():
    current = Settings(_env_file=None, frontend_allowed_origins="http://a.test, http://b.test")

    assert current.frontend_allowed_origins == ("http://a.test", "http://b.test")

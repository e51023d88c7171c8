import tempfile
from pathlib import Path

from device_monitor_gui.services.config_service import ConfigPaths, ConfigService


def _service(tmp_path: Path) -> ConfigService:
    return ConfigService(ConfigPaths(path=tmp_path / "cfg" / "config.json"))


def test_default_path_honours_xdg(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert ConfigService.default_path() == tmp_path / "device_monitor_gui" / "config.json"


def test_missing_file_gives_defaults(tmp_path) -> None:
    svc = _service(tmp_path)

    assert svc.load() == {}
    fs = svc.filesystem_settings()
    assert fs.presets == ["/", str(Path.home()), tempfile.gettempdir()]
    assert fs.path == "/"
    assert svc.log_level() == "INFO"


def test_malformed_file_loads_empty(tmp_path) -> None:
    svc = _service(tmp_path)
    svc.paths.path.parent.mkdir(parents=True)
    svc.paths.path.write_text("{not json", encoding="utf-8")

    assert svc.load() == {}


def test_remember_path_round_trip(tmp_path) -> None:
    svc = _service(tmp_path)
    svc.save({"log_level": "debug", "filesystem": {"presets": ["/srv", "/var"]}})

    svc.remember_path("/var")

    cfg = svc.load()
    assert cfg["filesystem"] == {"presets": ["/srv", "/var"], "path": "/var"}
    assert svc.filesystem_settings().path == "/var"
    assert svc.log_level() == "DEBUG"
    assert not svc.paths.path.with_suffix(".json.tmp").exists()


def test_unknown_log_level_falls_back(tmp_path) -> None:
    svc = _service(tmp_path)
    assert svc.log_level({"log_level": "chatty"}) == "INFO"

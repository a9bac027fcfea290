# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

from postrender.services.config.ini_config_service import IniConfigService


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


def user_ini(user_dir: Path) -> Path:
    return user_dir / IniConfigService.DEFAULT_FILE


def test_defaults_when_no_config_files():
    cfg = IniConfigService()
    assert cfg.app_version() == "0.0.0"
    assert cfg.loaded_from is None

    assert cfg.get("missing", "key", "x") == "x"
    assert cfg.get_list("post_render", "exclusions", None) is None


def test_project_root_config_is_used_when_present(tmp_path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[app]\nversion = 1.2.3\n[post_render]\nroot_file = out/book.adoc\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "1.2.3"
    assert cfg.get("post_render", "root_file") == "out/book.adoc"
    assert cfg.loaded_from == ini


def test_user_config_preferred_over_project_root(tmp_path, isolated_user_config):
    plat_path = user_ini(isolated_user_config)
    proj_root = tmp_path / "repo"
    proj_path = proj_root / "config" / "config.ini"

    write_ini(plat_path, "[app]\nversion = 2.0.0\n")
    write_ini(proj_path, "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "2.0.0"
    assert cfg.loaded_from == plat_path


def test_explicit_path_overrides_everything(tmp_path, isolated_user_config):
    plat_path = user_ini(isolated_user_config)
    proj_root = tmp_path / "repo"
    proj_path = proj_root / "config" / "config.ini"
    explicit_path = tmp_path / "explicit.ini"

    write_ini(plat_path, "[app]\nversion = 2.0.0\n")
    write_ini(proj_path, "[app]\nversion = 1.0.0\n")
    write_ini(explicit_path, "[app]\nversion = 9.9.9\n")

    cfg = IniConfigService(explicit_path=explicit_path, project_root=proj_root)
    assert cfg.app_version() == "9.9.9"
    assert cfg.loaded_from == explicit_path


def test_missing_explicit_path_falls_through(tmp_path, isolated_user_config):
    plat_path = user_ini(isolated_user_config)
    write_ini(plat_path, "[app]\nversion = 2.0.0\n")

    cfg = IniConfigService(explicit_path=tmp_path / "absent.ini")
    assert cfg.loaded_from == plat_path


def test_get_list_reads_multiline_value(isolated_user_config):
    write_ini(
        user_ini(isolated_user_config),
        "[post_render]\n"
        "exclusions =\n"
        "    [appendix]\n"
        "\n"
        "    include::R-CMD-check.adoc[]\n",
    )

    cfg = IniConfigService()
    assert cfg.get_list("post_render", "exclusions") == [
        "[appendix]",
        "include::R-CMD-check.adoc[]",
    ]


def test_get_list_empty_value_is_empty_list(isolated_user_config):
    write_ini(user_ini(isolated_user_config), "[post_render]\nexclusions =\n")

    cfg = IniConfigService()
    assert cfg.get_list("post_render", "exclusions", ["x"]) == []


def test_percent_signs_are_not_interpolated(isolated_user_config):
    write_ini(user_ini(isolated_user_config), "[post_render]\nroot_file = out/100%.adoc\n")

    cfg = IniConfigService()
    assert cfg.get("post_render", "root_file") == "out/100%.adoc"


def test_malformed_config_is_ignored_and_next_candidate_used(tmp_path, isolated_user_config):
    bad_path = user_ini(isolated_user_config)
    write_ini(bad_path, "this is not INI at all")
    proj_root = tmp_path / "repo"
    proj_path = proj_root / "config" / "config.ini"
    write_ini(proj_path, "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.loaded_from == proj_path
    assert cfg.app_version() == "1.0.0"


def test_malformed_config_alone_gives_defaults(isolated_user_config):
    write_ini(user_ini(isolated_user_config), "this is not INI at all")

    cfg = IniConfigService()
    assert cfg.loaded_from is None
    assert cfg.app_version() == "0.0.0"

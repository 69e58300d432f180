"""Tests for configuration helpers."""

from training_log.config import parse_status_list, resolve_chart_statuses


def test_parse_status_list() -> None:
    assert parse_status_list("メイン, レストポーズ,,メイン") == ["メイン", "レストポーズ"]
    assert parse_status_list("") == []
    assert parse_status_list(None) == []


def test_resolve_chart_statuses_falls_back_when_blank() -> None:
    assert resolve_chart_statuses(" , ") == ["メイン", "レストポーズ"]
    assert resolve_chart_statuses(None) == ["メイン", "レストポーズ"]
    assert resolve_chart_statuses("メイン") == ["メイン"]


def test_settings_defaults(settings) -> None:
    assert settings.main_status == "メイン"
    assert settings.chart_statuses == "メイン,レストポーズ"
    assert settings.export_prefix == "training_log"
    assert settings.timezone == "Asia/Tokyo"

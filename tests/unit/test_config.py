import pytest
from pydantic import ValidationError

from rushb import SuiteSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("RUSHB_COLOR", raising=False)
    monkeypatch.delenv("RUSHB_WIDTH", raising=False)


def test_defaults():
    settings = SuiteSettings()

    assert settings.color is True
    assert settings.width is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RUSHB_COLOR", "false")
    monkeypatch.setenv("RUSHB_WIDTH", "100")

    settings = SuiteSettings()

    assert settings.color is False
    assert settings.width == 100


def test_rejects_non_positive_width(monkeypatch):
    monkeypatch.setenv("RUSHB_WIDTH", "0")

    with pytest.raises(ValidationError):
        SuiteSettings()


def test_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        SuiteSettings(colour=False)

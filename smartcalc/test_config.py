import pytest
from pydantic import ValidationError

from smartcalc.config import CalculatorSettings, load_settings
from smartcalc.evaluator import DEFAULT_MAX_EXPONENT


def test_defaults(clean_env):
    settings = load_settings()
    assert settings.prompt == "> "
    assert settings.log_level == "WARNING"
    assert settings.max_exponent == DEFAULT_MAX_EXPONENT
    assert settings.history_file.endswith(".smartcalc_history")
    assert "~" not in settings.history_file


def test_environment_overrides_defaults(clean_env, monkeypatch):
    monkeypatch.setenv("SMARTCALC_MAX_EXPONENT", "50")
    monkeypatch.setenv("SMARTCALC_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.max_exponent == 50
    assert settings.log_level == "DEBUG"


def test_explicit_overrides_win(clean_env, monkeypatch):
    monkeypatch.setenv("SMARTCALC_LOG_LEVEL", "ERROR")
    assert load_settings(log_level="info").log_level == "INFO"
    assert load_settings(log_level=None).log_level == "ERROR"


def test_env_file(clean_env):
    env_file = clean_env / "calc.env"
    env_file.write_text('SMARTCALC_PROMPT="calc> "\nSMARTCALC_MAX_EXPONENT=7\n')
    settings = load_settings(env_file=str(env_file))
    assert settings.prompt == "calc> "
    assert settings.max_exponent == 7


def test_dotenv_in_working_directory(clean_env):
    (clean_env / ".env").write_text("SMARTCALC_HISTORY_FILE=\n")
    assert load_settings().history_file is None


def test_empty_history_file_disables_history(clean_env):
    assert load_settings(history_file="").history_file is None


@pytest.mark.parametrize("field,value", [
    ("log_level", "LOUD"),
    ("max_exponent", -1),
    ("max_exponent", "many"),
    ("max_result_bits", -5),
])
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        CalculatorSettings(**{field: value})


def test_result_bits_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv("SMARTCALC_MAX_RESULT_BITS", "128")
    assert load_settings().max_result_bits == 128
    assert load_settings(max_result_bits=64).max_result_bits == 64

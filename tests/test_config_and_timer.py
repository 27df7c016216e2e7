from pathlib import Path

from conftest import ManualScheduler

from kallkollen.config import DEFAULT_IMPULSE_DELAY, DEFAULT_MODEL, Settings, default_state_file
from kallkollen.impulse_timer import ImpulseTimer
from kallkollen.models import STAGE_ORDER, Stage, stage_fraction


def test_settings_defaults_from_empty_env() -> None:
    settings = Settings.from_env({})
    assert settings.gemini_api_key == ""
    assert settings.gemini_model == DEFAULT_MODEL
    assert settings.state_file == default_state_file()
    assert settings.impulse_delay == DEFAULT_IMPULSE_DELAY
    assert settings.strict is False
    assert settings.log_level == "INFO"


def test_settings_read_overrides() -> None:
    settings = Settings.from_env(
        {
            "GEMINI_API_KEY": " key ",
            "GEMINI_MODEL": "gemini-2.5-flash",
            "KALLKOLLEN_STATE_FILE": "/tmp/kk/state.json",
            "KALLKOLLEN_IMPULSE_DELAY": "2.5",
            "KALLKOLLEN_STRICT": "yes",
            "KALLKOLLEN_LOG_LEVEL": "debug",
        }
    )
    assert settings.gemini_api_key == "key"
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.state_file == Path("/tmp/kk/state.json")
    assert settings.impulse_delay == 2.5
    assert settings.strict is True
    assert settings.log_level == "DEBUG"


def test_bad_delay_falls_back_to_default() -> None:
    assert Settings.from_env({"KALLKOLLEN_IMPULSE_DELAY": "soon"}).impulse_delay == DEFAULT_IMPULSE_DELAY
    assert Settings.from_env({"KALLKOLLEN_IMPULSE_DELAY": "-1"}).impulse_delay == DEFAULT_IMPULSE_DELAY


def test_timer_opens_after_delay() -> None:
    scheduler = ManualScheduler()
    timer = ImpulseTimer(6.0, scheduler=scheduler, clock=scheduler.clock)
    timer.arm()
    scheduler.advance(5.0)
    assert not timer.is_open
    assert timer.remaining() == 1.0
    scheduler.advance(1.0)
    assert timer.is_open
    assert timer.remaining() == 0.0


def test_cancelled_timer_never_opens() -> None:
    scheduler = ManualScheduler()
    timer = ImpulseTimer(6.0, scheduler=scheduler, clock=scheduler.clock)
    timer.arm()
    timer.cancel()
    scheduler.advance(60.0)
    assert not timer.is_open
    assert not timer.armed


def test_rearming_restarts_countdown() -> None:
    scheduler = ManualScheduler()
    timer = ImpulseTimer(6.0, scheduler=scheduler, clock=scheduler.clock)
    timer.arm()
    scheduler.advance(4.0)
    timer.arm()
    scheduler.advance(4.0)
    assert not timer.is_open
    scheduler.advance(2.0)
    assert timer.is_open


def test_zero_delay_opens_immediately() -> None:
    timer = ImpulseTimer(0.0, scheduler=ManualScheduler())
    timer.arm()
    assert timer.is_open


def test_stage_order_and_fraction() -> None:
    assert STAGE_ORDER[0] is Stage.WELCOME
    assert STAGE_ORDER[-1] is Stage.RESULTS
    assert Stage.TRUTH_EFFECT.next() is Stage.RESULTS
    assert stage_fraction(Stage.WELCOME) == 0.0
    assert stage_fraction(Stage.RESULTS) == 1.0

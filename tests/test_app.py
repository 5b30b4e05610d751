from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "factory_insight" / "app.py")


def _app() -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _start_button(at):
    return next(b for b in at.button if b.label.startswith("Start Assessment"))


def test_welcome_requires_both_fields():
    at = _app()
    at.text_input[0].input("Asha")
    _start_button(at).click().run()

    assert [e.value for e in at.error] == ["Please fill in all details to continue."]
    assert at.session_state["controller"].phase.value == "WELCOME"


def test_welcome_starts_engagement():
    at = _app()
    at.text_input[0].input("Asha")
    at.text_input[1].input("ITC001")
    _start_button(at).click().run()

    assert not at.exception
    controller = at.session_state["controller"]
    assert controller.phase.value == "ENGAGEMENT"
    assert controller.session.profile.employee_id == "ITC001"


def test_admin_button_opens_dashboard_and_exit_resets():
    at = _app()
    at.button(key="open_admin").click().run()
    assert not at.exception
    assert at.session_state["controller"].phase.value == "DASHBOARD"

    at.button(key="exit_admin").click().run()
    assert at.session_state["controller"].phase.value == "WELCOME"

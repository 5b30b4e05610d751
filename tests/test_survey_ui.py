import logging
from urllib.parse import parse_qs, urlparse

import pytest

from reporting import build_results_summary
from survey_state import start_session
from survey_ui import _log_pdf_download, band_bar_html, hold_selection, qr_image_url


class RunStopped(Exception):
    """Stands in for Streamlit halting a run because a newer click is queued."""


class Placeholder:
    def __init__(self, stop_on_touch=None):
        self.touches = 0
        self.stop_on_touch = stop_on_touch

    def empty(self):
        self.touches += 1
        if self.touches == self.stop_on_touch:
            raise RunStopped()


def clock_sleep(clock, on_first_sleep=None):
    calls = []

    def sleep(seconds):
        calls.append(seconds)
        clock.advance(seconds)
        if len(calls) == 1 and on_first_sleep:
            on_first_sleep()

    sleep.calls = calls
    return sleep


def test_nothing_pending_returns_immediately(controller, clock):
    controller.submit_profile("Asha", "ITC001")
    placeholder = Placeholder()
    assert hold_selection(controller, placeholder, sleep=clock_sleep(clock)) is False
    assert placeholder.touches == 0
    assert controller.step == 0


def test_hold_waits_out_the_delay_in_slices(controller, clock):
    controller.submit_profile("Asha", "ITC001")
    controller.select_likert(4)
    start = clock.now
    sleep = clock_sleep(clock)
    placeholder = Placeholder()

    assert hold_selection(controller, placeholder, sleep=sleep, poll_seconds=0.05) is True
    assert controller.step == 1
    assert clock.now - start == pytest.approx(0.3)
    assert max(sleep.calls) <= 0.05 + 1e-9
    assert placeholder.touches > len(sleep.calls)


def test_queued_click_stops_the_run_before_the_old_advance(controller, clock):
    controller.submit_profile("Asha", "ITC001")
    controller.select_likert(2)

    # the second touch happens after the first slice has been slept
    with pytest.raises(RunStopped):
        hold_selection(controller, Placeholder(stop_on_touch=2), sleep=clock_sleep(clock), poll_seconds=0.05)
    assert controller.step == 0
    assert controller.pending is not None

    # the rerun handles the new click on the same question
    controller.select_likert(5)
    assert hold_selection(controller, Placeholder(), sleep=clock_sleep(clock)) is True
    assert controller.step == 1
    assert controller.session.responses.engagement_responses == {"e1": 5}


def test_newer_selection_during_hold_restarts_the_delay(controller, clock):
    controller.submit_profile("Asha", "ITC001")
    controller.select_likert(2)
    start = clock.now
    sleep = clock_sleep(clock, on_first_sleep=lambda: controller.select_likert(5))

    assert hold_selection(controller, Placeholder(), sleep=sleep, poll_seconds=0.05) is True
    assert clock.now - start == pytest.approx(0.35)
    assert controller.step == 1
    assert controller.session.responses.engagement_responses == {"e1": 5}


def test_band_bar_uses_band_colour(asha_at_results):
    html = band_bar_html(build_results_summary(asha_at_results.session))
    assert "width:100%" in html
    assert "#059669" in html


def test_band_bar_for_empty_session_is_rose():
    html = band_bar_html(build_results_summary(start_session("Asha", "ITC001")))
    assert "width:0%" in html
    assert "#e11d48" in html


def test_pdf_download_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="survey_ui")
    _log_pdf_download("abc-123")
    assert "Results PDF downloaded for session abc-123" in caplog.text


def test_qr_image_url_encodes_target():
    url = qr_image_url("https://itc-survey.app/?a=1&b=2", size=120)
    query = parse_qs(urlparse(url).query)
    assert url.startswith("https://api.qrserver.com/v1/create-qr-code/?")
    assert query["size"] == ["120x120"]
    assert query["data"] == ["https://itc-survey.app/?a=1&b=2"]

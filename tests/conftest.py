import pytest

from controller import PhaseController
from survey_state import Phase


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(clock):
    return PhaseController(advance_delay=0.3, clock=clock)


def answer_and_wait(controller, clock, select, *args):
    select(*args)
    clock.advance(controller.advance_delay)
    assert controller.tick()


@pytest.fixture
def asha_at_results(controller, clock):
    """Asha's session from the walkthrough, parked on the results screen."""
    controller.submit_profile("Asha", "ITC001")
    for _ in range(12):
        answer_and_wait(controller, clock, controller.select_likert, 5)
    for choice in (0, 0, 1, 0, 1):
        answer_and_wait(controller, clock, controller.select_behavioral, choice)
    for key in ("A", "D"):
        answer_and_wait(controller, clock, controller.select_sjt, key)
    assert controller.phase == Phase.RESULTS
    return controller

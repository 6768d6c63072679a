# type: ignore
import pytest

from rplan.planner.planner import RoutePlanner
import rplan.planner.permit2 as permit2

from unit_utils import TOKEN, ROUTER


@pytest.fixture
def planner():
    yield RoutePlanner()


@pytest.fixture
def permit():
    yield permit2.make_permit(TOKEN, ROUTER)

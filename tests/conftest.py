import pytest

from data.catalog import CatalogSnapshot, CatalogStore, seed_catalog
from engines.hop_core.models import (
    Airport,
    FlightBrief,
    Metar,
    MetarDecoded,
    WxQuestion,
)
from engines.hop_core.rng import SeededRng
from engines.mastery import InMemoryMasteryStore
from game_logic import HopGameLogic


class FixedRng:
    """每次都返回同一个值的随机源：0.0 让所有概率判定命中，0.999 让所有判定落空"""

    def __init__(self, value: float):
        self.value = value

    def next(self) -> float:
        return self.value


class FakeSocketIO:
    """记录 emit 和后台任务，不真正启动线程"""

    def __init__(self):
        self.emitted = []
        self.background_tasks = []

    def emit(self, event, payload=None, room=None):
        self.emitted.append((event, payload, room))

    def start_background_task(self, target, *args):
        self.background_tasks.append((target, args))

    def sleep(self, seconds):
        pass

    def events(self, name):
        return [payload for event, payload, _ in self.emitted if event == name]


def make_brief(category="VFR", has_atc=True, wx_correct=2, gust=None, ceiling=None, vis=15, phenomena="None"):
    return FlightBrief(
        airport=Airport(icao="CYOO", name="Oshawa", runways=("12/30",), elevation=460, has_atc=has_atc),
        runway="30",
        callsign="C-GABC",
        cruise_altitude="4,500",
        metar=Metar(
            raw="METAR CYOO 121800Z 27008KT 15SM FEW055 22/14 A3005",
            decoded=MetarDecoded(
                wind_dir=270, wind_speed=8, gust_speed=gust, vis_sm=vis, ceiling_ft=ceiling,
                cloud_layers="Few at 5,500", temp_c=22, dew_c=14, altimeter_inhg="30.05",
                phenomena=phenomena, flight_category=category,
            ),
            wx_question=WxQuestion(
                stem="What does FEW055 mean?",
                options=("a", "b", "c", "d"),
                correct_option=wx_correct,
            ),
        ),
    )


@pytest.fixture(scope="session")
def snapshot():
    return CatalogSnapshot.from_static()


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def seeded_rng():
    def factory(seed=42):
        return SeededRng(seed)
    return factory


@pytest.fixture
def brief_factory():
    return make_brief


@pytest.fixture
def store():
    catalog = CatalogStore("sqlite://")
    seed_catalog(catalog)
    return catalog


@pytest.fixture
def fake_socketio():
    return FakeSocketIO()


@pytest.fixture
def action_log():
    return []


@pytest.fixture
def logic(snapshot, fake_socketio, action_log):
    sessions = {}

    def log_action(session_id, action, details=None, phase=None):
        action_log.append({"session": session_id, "action": action, "details": details, "phase": phase})

    counter = iter(range(1000))
    return HopGameLogic(sessions, fake_socketio, log_action, snapshot,
                        mastery=InMemoryMasteryStore(),
                        rng_factory=lambda: SeededRng(next(counter)))


@pytest.fixture
def client(store):
    import app_web

    app_web.init_services(catalog=store, mastery=InMemoryMasteryStore(), validate=True)
    app_web.app.config["TESTING"] = True
    with app_web.app.test_client() as test_client:
        yield test_client
    app_web.sessions.clear()

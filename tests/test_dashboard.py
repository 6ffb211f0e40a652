import pytest

from modeldash.core.dashboard import Dashboard
from modeldash.core.projector.view_projector import ViewProjector
from modeldash.core.tracker.model_tracker import ModelStateTracker
from modeldash.core.transport.channel import EventChannel
from modeldash.shared.config import AppConfig


@pytest.fixture
def config():
    return AppConfig(server_origin="https://dash.example.com", reconnect_delay_ms=500, tick_interval_ms=50)


@pytest.fixture
def dashboard(config, clock, sockets, timers):
    tracker = ModelStateTracker(clock=clock, stale_timeout_seconds=config.stale_timeout_seconds)
    channel = EventChannel(
        config.websocket_url(),
        reconnect_delay_ms=config.reconnect_delay_ms,
        socket_factory=sockets,
        timer_factory=timers,
    )
    projector = ViewProjector(tracker, interval_ms=config.tick_interval_ms, timer_factory=timers)
    return Dashboard(config, channel=channel, tracker=tracker, projector=projector)


def test_start_connects_and_ticks(dashboard, sockets, timers):
    dashboard.start()
    assert dashboard.is_running()
    assert sockets.last.opened_url == "wss://dash.example.com/ws"
    assert dashboard.projector.is_running()
    assert timers.timers[1].interval == 50


def test_events_flow_to_snapshot(dashboard, sockets, clock):
    seen = []
    dashboard.on_snapshot(seen.append)
    dashboard.start()
    sock = sockets.last
    sock.accept()
    sock.receive('{"Selection": {"model": "Kickoff"}}')
    clock.advance(1.5)
    sock.receive('{"Selection": {"model": "Defend"}}')
    sock.receive('{"Statistics": {"model": "Kickoff", "counts": 50}}')
    sock.receive('{"Unknown": {}}')
    clock.advance(0.25)

    snapshot = dashboard.projector.tick()
    assert seen[-1] is snapshot
    assert snapshot.current_model.name == "Defend"
    assert snapshot.current_model.detail == "0.250s"
    assert [(v.name, v.detail) for v in snapshot.previous_models] == [("Kickoff", "1.500s")]
    assert dashboard.tracker.get_state().usage_dict() == {"Kickoff": 50, "Defend": 1}


def test_silence_after_one_event_goes_back_to_connecting(dashboard, sockets, clock):
    dashboard.start()
    sockets.last.accept()
    sockets.last.receive('{"Selection": {"model": "Kickoff"}}')
    clock.advance(11)
    snapshot = dashboard.projector.tick()
    assert (snapshot.current_model.name, snapshot.current_model.detail) == ("None", "connecting...")


def test_stop_cancels_timers_and_disconnects(dashboard, sockets, timers):
    dashboard.start()
    sock = sockets.last
    sock.accept()
    sock.drop()
    reconnect_timer = timers.timers[0]
    assert reconnect_timer.isActive()

    dashboard.stop()
    assert not dashboard.is_running()
    assert not dashboard.projector.is_running()
    assert not reconnect_timer.isActive()
    dashboard.stop()


def test_stop_closes_open_socket(dashboard, sockets):
    dashboard.start()
    sockets.last.accept()
    dashboard.stop()
    assert sockets.last.close_calls == 1
    assert not dashboard.channel.is_connected()

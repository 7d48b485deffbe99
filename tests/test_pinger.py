import threading

import pytest

from mqttcore.pinger import PingHandler, PingTimeoutError


def test_missing_response_reports_timeout():
    errors = []
    pings = []
    handler = PingHandler(fail_handler=errors.append)
    handler.start(lambda: pings.append(1), 0.08)
    assert len(errors) == 1
    assert isinstance(errors[0], PingTimeoutError)
    assert str(errors[0]) == "ping resp timed out"
    assert len(pings) >= 1


def test_send_failure_is_reported_and_stops():
    errors = []
    failure = OSError("broken pipe")
    handler = PingHandler(fail_handler=errors.append)

    def send():
        raise failure

    handler.start(send, 0.04)
    assert errors == [failure]


def test_responses_keep_loop_alive_until_stopped():
    errors = []
    handler = PingHandler(fail_handler=errors.append)
    enough = threading.Event()
    pings = []

    def send():
        pings.append(1)
        handler.ping_resp()
        if len(pings) >= 3:
            enough.set()

    worker = threading.Thread(target=handler.start, args=(send, 0.04))
    worker.start()
    assert enough.wait(5)
    handler.stop()
    worker.join(5)
    assert not worker.is_alive()
    assert errors == []
    assert len(pings) >= 3


def test_stop_before_start_is_harmless():
    handler = PingHandler()
    handler.stop()
    handler.ping_resp()
    with pytest.raises(ValueError):
        handler.start(lambda: None, 0)


def test_stop_is_idempotent():
    handler = PingHandler()
    started = threading.Event()

    def send():
        started.set()

    worker = threading.Thread(target=handler.start, args=(send, 0.04))
    worker.start()
    assert started.wait(5)
    handler.stop()
    handler.stop()
    worker.join(5)
    assert not worker.is_alive()
import time

from waldem import log


def test_logger_names():
    log.init()
    assert log.core_logger().name == "WALDEM"
    assert log.client_logger().name == "APP"


def test_loggers_accept_every_level():
    log.init()
    assert log.core_logger().level == log.TRACE
    assert log.client_logger().isEnabledFor(log.TRACE)
    assert log.core_logger().propagate is False


def test_init_twice_keeps_one_handler():
    log.init()
    log.init()
    assert len(log.core_logger().handlers) == 1
    assert len(log.client_logger().handlers) == 1


def test_core_message_format(capsys):
    log.init()
    log.core_logger().info("engine started")
    out = capsys.readouterr().out
    assert out[0] == "["
    assert out[9:] == "] WALDEM: engine started\n"
    parsed = time.strptime(out[1:9], "%H:%M:%S")
    assert 0 <= parsed.tm_hour < 24


def test_client_trace_message_written(capsys):
    log.init()
    log.client_logger().log(log.TRACE, "trace line")
    out = capsys.readouterr().out
    assert out.endswith("APP: trace line\n")
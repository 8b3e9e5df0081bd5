import os
import subprocess
import sys
import threading

import pytest

from gatekit.supervisor import (
    DEFAULT_PID_FILE,
    RestartLimiter,
    Supervisor,
    is_process_running,
    main,
)


def test_running_for_own_pid(tmp_path):
    pid_file = tmp_path / "app.pid"
    pid_file.write_text(str(os.getpid()))
    assert is_process_running(pid_file) is True


def test_missing_pid_file(tmp_path):
    assert is_process_running(tmp_path / "absent.pid") is False


def test_garbage_pid_file(tmp_path):
    pid_file = tmp_path / "app.pid"
    pid_file.write_text("not a pid")
    assert is_process_running(pid_file) is False
    pid_file.write_text("")
    assert is_process_running(pid_file) is False


def test_dead_process(tmp_path):
    child = subprocess.Popen([sys.executable, "-c", "pass"])
    child.wait()
    pid_file = tmp_path / "app.pid"
    pid_file.write_text(str(child.pid))
    assert is_process_running(pid_file) is False


def test_limiter_cools_down_after_burst():
    limiter = RestartLimiter(5, 5, 10)
    delays = [limiter.record(100 + step) for step in range(7)]
    assert delays == [0, 0, 0, 0, 0, 0, 10]
    assert limiter.record(107) == 0


def test_limiter_resets_outside_window():
    limiter = RestartLimiter(5, 5, 10)
    delays = [limiter.record(step * 5) for step in range(20)]
    assert delays == [0] * 20


def test_check_once_skips_running_process(tmp_path):
    pid_file = tmp_path / "app.pid"
    pid_file.write_text(str(os.getpid()))
    supervisor = Supervisor([sys.executable, "-c", "raise SystemExit(3)"], pid_file)
    assert supervisor.check_once() is None


def test_check_once_starts_missing_process(tmp_path):
    supervisor = Supervisor(
        [sys.executable, "-c", "raise SystemExit(3)"], tmp_path / "absent.pid"
    )
    child = supervisor.check_once()
    assert child.wait(timeout=30) == 3


def test_check_once_reports_launch_failure(tmp_path):
    supervisor = Supervisor(
        [str(tmp_path / "no-such-program")], tmp_path / "absent.pid"
    )
    assert supervisor.check_once() is None


def test_empty_command_rejected(tmp_path):
    with pytest.raises(ValueError):
        Supervisor([], tmp_path / "app.pid")


def test_run_stops(tmp_path):
    pid_file = tmp_path / "app.pid"
    pid_file.write_text(str(os.getpid()))
    supervisor = Supervisor([sys.executable, "-c", "pass"], pid_file, interval=0.01)
    worker = threading.Thread(target=supervisor.run)
    worker.start()
    supervisor.stop()
    worker.join(timeout=10)
    assert not worker.is_alive()


def test_default_pid_file_matches_gateway():
    supervisor = Supervisor()
    assert supervisor.pid_file == DEFAULT_PID_FILE == "/var/run/gateway.pid"


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--pid-file" in capsys.readouterr().out
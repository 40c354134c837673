import pytest

from cyclebreak import usage
from cyclebreak.usage import UsageMeter, UsageStat


@pytest.fixture
def status_file(tmp_path, monkeypatch):
    path = tmp_path / "status"
    monkeypatch.setattr(usage, "STATUS_PATH", str(path))
    return path


def write_status(path, peak, size):
    path.write_text(
        "Name:\tpython\n"
        f"VmPeak:\t  {peak} kB\n"
        f"VmSize:\t  {size} kB\n"
        "VmPeak:\t  1 kB\n"
    )


def test_check_usage_reads_memory(status_file):
    write_status(status_file, 2048, 1024)
    stat = UsageMeter().check_usage()
    assert stat.vm_peak == 2048
    assert stat.vm_size == 1024
    assert stat.u_time >= 0
    assert stat.s_time >= 0
    assert stat.r_time > 0


def test_lines_after_vmsize_are_ignored(status_file):
    status_file.write_text("VmSize:\t 700 kB\nVmPeak:\t 900 kB\n")
    stat = UsageMeter().check_usage()
    assert stat.vm_size == 700
    assert stat.vm_peak == 0


def test_missing_status_file_raises(status_file):
    with pytest.raises(OSError):
        UsageMeter().check_usage()


def test_total_usage_differences(status_file):
    meter = UsageMeter()
    write_status(status_file, 5000, 1024)
    meter.total_start()
    write_status(status_file, 4000, 3000)
    stat = meter.total_usage()
    assert stat.vm_size == 3000
    assert stat.vm_diff == 3000 - 1024
    assert stat.vm_peak == 5000
    assert stat.r_time >= 0
    assert stat.u_time >= 0


def test_period_usage_restarts(status_file):
    meter = UsageMeter()
    write_status(status_file, 100, 100)
    meter.period_start()
    write_status(status_file, 200, 200)
    meter.period_start()
    stat = meter.period_usage()
    assert stat.vm_diff == 0
    assert stat.vm_peak == 200


def test_period_usage_without_start_is_absolute(status_file):
    write_status(status_file, 640, 320)
    meter = UsageMeter()
    absolute = meter.check_usage()
    stat = meter.period_usage()
    assert stat.vm_diff == stat.vm_size == 320
    assert stat.u_time >= absolute.u_time


def test_cpu_time_sums_user_and_system():
    stat = UsageStat(u_time=7, s_time=5)
    assert stat.cpu_time == 7 + 5
import pytest

from fault_recorder import FaultRecord, FaultRecorder
from flaps_conf import FlapsConf
from sfcc_configuration import SfccConfiguration
from slats_flaps_control_computer import SfccOutputs
from telemetry_recorder import HEADER, TelemetryRecorder


class FakeClock:
    def __init__(self, start: float = 0.0):
        self._t = float(start)

    def __call__(self) -> float:
        return self._t

    def advance(self, dt: float) -> None:
        self._t += float(dt)


def make_outputs(number: int) -> SfccOutputs:
    return SfccOutputs(
        number=number,
        powered=True,
        flaps_conf=FlapsConf.CONF_1F,
        slats_conf=FlapsConf.CONF_1,
        flaps_demanded_angle_deg=10.0,
        slats_demanded_angle_deg=18.0,
        alpha_lock_engaged=False,
        flaps_drive_signal=True,
        slats_drive_signal=False,
    )


class TestFaultRecorder:
    def test_records_timestamped_code(self, tmp_path):
        clock = FakeClock(1.25)
        path = tmp_path / "nested" / "faults.txt"
        recorder = FaultRecorder(path, clock=clock)

        rec = recorder.record("SFCC_INVALID_DETENT_5")

        assert rec == FaultRecord(timestamp_s=1.25, fault_code="SFCC_INVALID_DETENT_5")
        assert path.read_text(encoding="utf-8") == "1.250000,SFCC_INVALID_DETENT_5\n"

    def test_is_append_only(self, tmp_path):
        clock = FakeClock()
        path = tmp_path / "faults.txt"
        recorder = FaultRecorder(path, clock=clock)

        recorder.record("A")
        clock.advance(0.5)
        recorder.record("B")

        assert path.read_text(encoding="utf-8").splitlines() == ["0.000000,A", "0.500000,B"]
        assert [r.fault_code for r in recorder.records] == ["A", "B"]


class TestTelemetryRecorder:
    def test_header_written_once(self, tmp_path):
        path = tmp_path / "telemetry.csv"
        TelemetryRecorder(path, clock=FakeClock())
        TelemetryRecorder(path, clock=FakeClock())

        assert path.read_text(encoding="utf-8") == HEADER

    def test_records_one_line_per_sfcc(self, tmp_path):
        path = tmp_path / "telemetry.csv"
        recorder = TelemetryRecorder(path, clock=FakeClock(3.0))

        recorder.record([make_outputs(1), make_outputs(2)])

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[1:] == [
            "3.000000,1,True,CONF_1F,CONF_1,10.00,18.00,False,True,False",
            "3.000000,2,True,CONF_1F,CONF_1,10.00,18.00,False,True,False",
        ]


class TestSfccConfiguration:
    def test_defaults_match_thresholds(self):
        cfg = SfccConfiguration()
        assert cfg.conf1f_entry_max_airspeed_kt == 100.0
        assert cfg.conf1f_retract_airspeed_kt == 210.0
        assert cfg.equal_angle_delta_deg == 0.01
        assert (cfg.alpha_lock_engage_speed_kt, cfg.alpha_lock_disengage_speed_kt) == (148.0, 154.0)
        assert (cfg.alpha_lock_engage_alpha_deg, cfg.alpha_lock_disengage_alpha_deg) == (8.6, 7.6)
        assert cfg.alpha_lock_ground_inhibit_speed_kt == 60.0
        assert cfg.ground_requires_both_gears is False
        assert cfg.is_valid() is True

    def test_is_frozen(self):
        cfg = SfccConfiguration()
        with pytest.raises(AttributeError):
            cfg.equal_angle_delta_deg = 1.0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"equal_angle_delta_deg": 0.0},
            {"alpha_lock_engage_speed_kt": 160.0},
            {"alpha_lock_disengage_alpha_deg": 9.0},
            {"conf1f_entry_max_airspeed_kt": 250.0},
        ],
    )
    def test_validate_rejects_incoherent_thresholds(self, overrides):
        cfg = SfccConfiguration(**overrides)
        with pytest.raises(ValueError):
            cfg.validate()
        assert cfg.is_valid() is False

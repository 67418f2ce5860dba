"""
Title: SFCC and Slats/Flaps Electronic Complex Integration Tests
Author: Alex Cooke
Date Created: 2026-10-15
Last Modified: 2026-10-17
Version: 1.3

Purpose:
Provides integration-level verification of the Slats/Flaps Control Computer
(ground state refresh ordering, gear-compressed combination, power loss
behaviour, published outputs) and of the dual-SFCC electronic complex
(single handle refresh per tick, replicated outputs, invalid detent
propagation and fault recording, host output writing).

Targeted Requirements (Verification Only):
- SFCC-FR007: Ground state consumed by slats in the same tick it is refreshed.
- SFCC-FR008: Two independent SFCCs produce identical outputs for identical inputs.
- SFCC-FR010: Handle memory refreshed exactly once per tick.
- SFCC-FR011: Outputs written under stable host variable names.
- SFCC-SR001: Invalid detents surfaced as InvalidDetentError and recorded.
- SFCC-SR002: ADIRU fallback applied per SFCC.
- SFCC-SR003: Unpowered SFCC retains state and commands no drive.

Scope and Limitations:
- Uses bench simulators and a fake clock; no real-time scheduling.

Safety Notice:
This file is a test artefact intended solely for verification and assessment.
It must not be used in operational or flight-certified systems.

Dependencies:
- Python 3.10+
- pytest
- slats_flaps_control_computer.py
- slats_flaps_electronic_complex.py
- fault_recorder.py
- sims/air_data_simulator.py
- sims/lgciu_simulator.py
- sims/position_pickoff_simulator.py

Related Documents:
- SFCC Integration Test Plan
- SFCC Requirements Specification

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

import dataclasses

import pytest

from fault_recorder import FaultRecorder
from flaps_conf import FlapsConf, InvalidDetentError
from flaps_handle import FlapsHandle
from sensor_interfaces import UpdateContext
from sfcc_configuration import SfccConfiguration
from signed_status import SignStatus
from sims.air_data_simulator import AirDataSimulator
from sims.lgciu_simulator import LgciuSimulator
from sims.position_pickoff_simulator import PositionPickoffSimulator
from slats_flaps_control_computer import SlatsFlapsControlComputer
from slats_flaps_electronic_complex import (
    INVALID_DETENT_FAULT_CODE,
    SfccWiring,
    SlatsFlapsElectronicComplex,
)


class FakeClock:
    def __init__(self, start: float = 0.0):
        self._t = float(start)

    def __call__(self) -> float:
        return self._t

    def advance(self, dt: float) -> None:
        self._t += float(dt)


class Lever:
    def __init__(self, position: int = 0):
        self.position = position
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return self.position


class Power:
    def __init__(self, present: bool = True):
        self.present = present

    def __call__(self) -> bool:
        return self.present


CTX = UpdateContext(indicated_airspeed_kt=0.0, alpha_deg=0.0)


# -----------------------------
# SlatsFlapsControlComputer
# -----------------------------

@pytest.fixture
def sfcc_rig():
    handle = FlapsHandle()
    adirus = (AirDataSimulator(airspeed_kt=200.0, alpha_deg=2.0), AirDataSimulator(airspeed_kt=200.0, alpha_deg=2.0))
    lgciu = LgciuSimulator(left_compressed=False, right_compressed=False)
    flaps_fppu = PositionPickoffSimulator()
    slats_fppu = PositionPickoffSimulator()
    power = Power()
    sfcc = SlatsFlapsControlComputer(number=1, power_present_provider=power)
    sfcc.logs = []
    sfcc.log = lambda msg: sfcc.logs.append(msg)

    def tick():
        sfcc.update(CTX, handle, adirus, lgciu, flaps_fppu, slats_fppu)

    return sfcc, handle, adirus, lgciu, power, tick


def test_fr007_ground_state_used_by_slats_in_same_tick(sfcc_rig):
    sfcc, handle, adirus, lgciu, power, tick = sfcc_rig
    for adiru in adirus:
        adiru.set_airspeed_kt(50.0)
    handle.read(1)

    lgciu.set_compressed(True)
    tick()
    assert sfcc.is_on_ground is True
    assert sfcc.alpha_lock_engaged is False

    lgciu.set_compressed(False)
    tick()
    assert sfcc.is_on_ground is False
    assert sfcc.slats_channel.is_on_ground is False
    assert sfcc.alpha_lock_engaged is True


def test_fr007_either_gear_compressed_means_on_ground_by_default(sfcc_rig):
    sfcc, handle, adirus, lgciu, power, tick = sfcc_rig
    lgciu.set_compressed(True, False)
    tick()
    assert sfcc.is_on_ground is True


def test_fr007_both_gears_required_when_configured():
    sfcc = SlatsFlapsControlComputer(config=SfccConfiguration(ground_requires_both_gears=True))
    adirus = (AirDataSimulator(), AirDataSimulator())
    lgciu = LgciuSimulator(left_compressed=True, right_compressed=False)

    sfcc.update(CTX, FlapsHandle(), adirus, lgciu, PositionPickoffSimulator(), PositionPickoffSimulator())
    assert sfcc.is_on_ground is False

    lgciu.set_compressed(True, True)
    sfcc.update(CTX, FlapsHandle(), adirus, lgciu, PositionPickoffSimulator(), PositionPickoffSimulator())
    assert sfcc.is_on_ground is True


def test_sfcc_outputs_after_selecting_conf1f(sfcc_rig):
    sfcc, handle, adirus, lgciu, power, tick = sfcc_rig
    for adiru in adirus:
        adiru.set_airspeed_kt(90.0)
    handle.read(1)
    tick()

    out = sfcc.outputs()
    assert out.flaps_conf == FlapsConf.CONF_1F
    assert out.slats_conf == FlapsConf.CONF_1
    assert out.flaps_demanded_angle_deg == 10.0
    assert out.slats_demanded_angle_deg == 18.0
    assert out.flaps_drive_signal is True
    assert out.slats_drive_signal is True
    assert out.powered is True


def test_sfcc_flaps_and_slats_use_their_own_adiru(sfcc_rig):
    sfcc, handle, adirus, lgciu, power, tick = sfcc_rig
    adirus[0].set_airspeed_kt(90.0)
    adirus[1].set_airspeed_kt(140.0)
    handle.read(1)
    tick()

    assert sfcc.flaps_channel.calculated_conf == FlapsConf.CONF_1F
    assert sfcc.alpha_lock_engaged is True


def test_sr003_unpowered_sfcc_holds_state_and_stops_drive(sfcc_rig):
    sfcc, handle, adirus, lgciu, power, tick = sfcc_rig
    handle.read(2)
    tick()
    before = sfcc.outputs()
    assert before.flaps_drive_signal is True

    power.present = False
    handle.read(4)
    tick()

    out = sfcc.outputs()
    assert sfcc.is_powered is False
    assert out.flaps_conf == before.flaps_conf
    assert out.flaps_demanded_angle_deg == before.flaps_demanded_angle_deg
    assert out.flaps_drive_signal is False
    assert out.slats_drive_signal is False
    assert "SFCC1: power lost" in sfcc.logs

    power.present = True
    handle.read(3)
    tick()
    assert sfcc.is_powered is True
    assert sfcc.flaps_channel.calculated_conf == FlapsConf.CONF_3
    assert "SFCC1: power restored" in sfcc.logs


# -----------------------------
# SlatsFlapsElectronicComplex
# -----------------------------

def make_complex(lever=None, fault_recorder=None, power=(None, None)):
    adirus = (AirDataSimulator(airspeed_kt=200.0, alpha_deg=2.0), AirDataSimulator(airspeed_kt=200.0, alpha_deg=2.0))
    wirings = [
        SfccWiring(
            lgciu=LgciuSimulator(False, False),
            flaps_feedback=PositionPickoffSimulator(),
            slats_feedback=PositionPickoffSimulator(),
            power_present_provider=p,
        )
        for p in power
    ]
    complex_ = SlatsFlapsElectronicComplex(
        air_data_units=adirus,
        wirings=wirings,
        handle_position_provider=lever,
        fault_recorder=fault_recorder,
    )
    complex_.log = lambda msg: None
    return complex_, adirus, wirings


def test_fr010_handle_refreshed_once_per_tick():
    lever = Lever(0)
    complex_, _, _ = make_complex(lever)

    for n in range(1, 4):
        complex_.update(CTX)
        assert lever.reads == n

    assert complex_.tick_count == 3


def test_fr008_identical_inputs_give_identical_outputs():
    lever = Lever(0)
    complex_, adirus, _ = make_complex(lever)

    for position, airspeed in [(0, 200.0), (1, 90.0), (1, 90.0), (2, 150.0), (3, 140.0), (0, 140.0), (0, 220.0)]:
        lever.position = position
        for adiru in adirus:
            adiru.set_airspeed_kt(airspeed)
        complex_.update(CTX)

        out_1, out_2 = complex_.outputs()
        assert out_1.number == 1
        assert out_2.number == 2
        assert dataclasses.replace(out_1, number=0) == dataclasses.replace(out_2, number=0)


def test_handle_one_to_zero_with_alpha_lock_keeps_slats_extended():
    lever = Lever(1)
    complex_, adirus, _ = make_complex(lever)
    for adiru in adirus:
        adiru.set_alpha_deg(9.0)

    complex_.update(CTX)
    assert all(o.alpha_lock_engaged for o in complex_.outputs())

    lever.position = 0
    complex_.update(CTX)
    for out in complex_.outputs():
        assert out.flaps_conf == FlapsConf.CONF_0
        assert out.slats_conf == FlapsConf.CONF_1
        assert out.slats_demanded_angle_deg == 18.0


def test_sr002_fallback_airspeed_used_by_complex():
    lever = Lever(0)
    complex_, adirus, _ = make_complex(lever)
    complex_.update(CTX)

    adirus[0].set_airspeed_kt(999.0, SignStatus.NO_COMPUTED_DATA)
    lever.position = 1
    complex_.update(UpdateContext(indicated_airspeed_kt=90.0, alpha_deg=0.0))

    assert all(o.flaps_conf == FlapsConf.CONF_1F for o in complex_.outputs())


def test_one_unpowered_sfcc_does_not_affect_the_other():
    lever = Lever(0)
    power_2 = Power(False)
    complex_, _, _ = make_complex(lever, power=(None, power_2))

    lever.position = 2
    complex_.update(CTX)

    out_1, out_2 = complex_.outputs()
    assert out_1.flaps_conf == FlapsConf.CONF_2
    assert out_2.flaps_conf == FlapsConf.CONF_0
    assert out_2.powered is False
    assert out_2.flaps_drive_signal is False


def test_sr001_invalid_detent_raised_and_recorded_once(tmp_path):
    clock = FakeClock(2.5)
    recorder = FaultRecorder(tmp_path / "faults.txt", clock=clock)
    lever = Lever(4)
    complex_, _, _ = make_complex(lever, fault_recorder=recorder)

    complex_.update(CTX)
    before = complex_.outputs()

    lever.position = 5
    with pytest.raises(InvalidDetentError):
        complex_.update(CTX)
    assert complex_.outputs() == before
    assert complex_.tick_count == 1

    # Back to a valid detent, then the same rejected move again
    lever.position = 4
    complex_.update(CTX)
    lever.position = 5
    with pytest.raises(InvalidDetentError):
        complex_.update(CTX)

    lines = (tmp_path / "faults.txt").read_text(encoding="utf-8").splitlines()
    assert lines == [f"2.500000,{INVALID_DETENT_FAULT_CODE}_5"]


def test_sr001_out_of_range_lever_rejected_by_handle_memory():
    lever = Lever(2)
    complex_, _, _ = make_complex(lever)
    complex_.update(CTX)

    lever.position = 9
    with pytest.raises(InvalidDetentError):
        complex_.update(CTX)

    assert complex_.flaps_handle.position() == 2


def test_sr001_lever_held_at_rejected_detent_keeps_rejecting():
    lever = Lever(2)
    complex_, _, _ = make_complex(lever)
    complex_.update(CTX)
    before = complex_.outputs()
    positions = complex_.flaps_handle.positions()

    lever.position = 5
    for _ in range(2):
        with pytest.raises(InvalidDetentError):
            complex_.update(CTX)
        assert complex_.flaps_handle.positions() == positions

    assert complex_.outputs() == before
    assert complex_.tick_count == 1
    for out in complex_.outputs():
        assert out.flaps_conf == FlapsConf.CONF_2
        assert out.slats_conf == FlapsConf.CONF_1F


def test_fr011_write_publishes_each_sfcc_output():
    lever = Lever(3)
    complex_, _, _ = make_complex(lever)
    complex_.update(CTX)

    written = {}
    complex_.write(written.__setitem__)

    assert len(written) == 10
    assert written["SFCC_1_FLAP_DEMANDED_ANGLE"] == 20.0
    assert written["SFCC_2_SLAT_DEMANDED_ANGLE"] == 22.0
    assert written["SFCC_1_FLAP_DRIVE"] is True
    assert written["SFCC_2_ALPHA_LOCK_ENGAGED"] is False


def test_complex_requires_two_air_data_units_and_two_wirings():
    with pytest.raises(ValueError):
        SlatsFlapsElectronicComplex(air_data_units=[AirDataSimulator()], wirings=[])

"""
Title: SFCC Bench CLI and Configuration Annunciation Tests
Author: Alex Cooke
Date Created: 2026-10-16
Last Modified: 2026-10-17
Version: 1.1

Purpose:
Provides verification of the bench command interpreter and the
ConfigurationAnnunciator: lever and environment commands, tick stepping,
rejected detent reporting, power switching, telemetry recording, and
annunciation of configuration changes only when they occur.

Targeted Requirements (Verification Only):
- None (supporting tooling verification only)

Scope and Limitations:
- Output verification is limited to CLI stdout behaviour.
- The background loop thread is not started.

Safety Notice:
This file is a test artefact intended solely for verification and assessment.
It must not be used in operational or flight-certified systems.

Dependencies:
- Python 3.10+
- pytest
- cli.py
- main.py

Related Documents:
- SFCC Unit Test Plan

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

import pytest

from cli import ConfigurationAnnunciator, handle_command
from flaps_conf import FlapsConf
from main import initialize


@pytest.fixture
def ctx():
    context = initialize(fault_log=None)
    yield context
    context.shutdown()


def run_commands(ctx, *commands):
    for cmd in commands:
        assert handle_command(ctx, cmd) is True


def test_lever_airspeed_and_step_select_conf1f(ctx, capsys):
    run_commands(ctx, "gear 0", "ias 90", "lever 1", "step")

    out = capsys.readouterr().out
    assert "Lever set to 1" in out
    assert "SFCC1: FLAPS CONF_1F SLATS CONF_1" in out
    assert "SFCC2: FLAPS CONF_1F SLATS CONF_1" in out
    assert "Stepped 1 ticks" in out


def test_state_command_prints_both_sfccs(ctx, capsys):
    run_commands(ctx, "ias 250", "lever 2", "step", "state")

    lines = capsys.readouterr().out.strip().splitlines()
    assert "SFCC1: FLAPS CONF_2 SLATS CONF_1F" in lines
    assert "SFCC2: FLAPS CONF_2 SLATS CONF_1F" in lines


def test_rejected_detent_reported_not_raised(ctx, capsys):
    run_commands(ctx, "ias 250", "lever 4", "step", "lever 5", "step")

    out = capsys.readouterr().out
    assert "Tick rejected:" in out
    assert ctx.bench.complex.sfcc_1.flaps_channel.calculated_conf == FlapsConf.CONF_FULL


def test_power_command_unpowers_one_sfcc(ctx, capsys):
    run_commands(ctx, "power 2 0", "ias 250", "lever 3", "step")

    out_1, out_2 = ctx.bench.complex.outputs()
    assert out_1.flaps_conf == FlapsConf.CONF_3
    assert out_2.powered is False
    assert out_2.flaps_conf == FlapsConf.CONF_0


def test_ssm_command_switches_to_fallback_airspeed(ctx):
    run_commands(ctx, "ias 250", "fallback ias 90", "ssm 1 fail", "lever 1", "step")

    assert ctx.bench.complex.sfcc_1.flaps_channel.calculated_conf == FlapsConf.CONF_1F


def test_gear_command_per_lgciu(ctx):
    run_commands(ctx, "gear 0", "gear 2 1 0", "step")

    assert ctx.bench.complex.sfcc_1.is_on_ground is False
    assert ctx.bench.complex.sfcc_2.is_on_ground is True


def test_record_command_writes_telemetry(ctx, tmp_path):
    path = tmp_path / "telemetry.csv"
    run_commands(ctx, f"record {path}", "ias 250", "lever 2", "step 2")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("timestamp,sfcc,powered")
    assert len(lines) == 1 + 2 * 2
    assert ",CONF_2,CONF_1F," in lines[-1]


@pytest.mark.parametrize("cmd", ["lever", "power 3 1", "ssm 1 maybe", "gear 2", "fallback", "turbulence 1"])
def test_bad_usage_prints_usage(ctx, capsys, cmd):
    assert handle_command(ctx, cmd) is True
    assert "Usage:" in capsys.readouterr().out


def test_unknown_and_quit(ctx, capsys):
    assert handle_command(ctx, "frobnicate") is True
    assert "Unknown command" in capsys.readouterr().out
    assert handle_command(ctx, "q") is False


def test_annunciator_prints_only_on_change(ctx, capsys):
    ann = ConfigurationAnnunciator()

    ann(ctx.bench)
    ann(ctx.bench)

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [
        "SFCC1: FLAPS CONF_0 SLATS CONF_0",
        "SFCC2: FLAPS CONF_0 SLATS CONF_0",
    ]


def test_annunciator_reports_alpha_lock(ctx, capsys):
    run_commands(ctx, "gear 0", "ias 200", "alpha 9", "lever 1")
    ctx.loop.step(1)

    out = capsys.readouterr().out
    assert "SFCC1: FLAPS CONF_1 SLATS CONF_1 ALPHA LOCK" in out


def test_surfaces_slew_toward_demand(ctx):
    run_commands(ctx, "ias 250", "lever 2", "step 3")

    assert ctx.bench.flaps_fppu.angle() == pytest.approx(0.3)
    assert ctx.bench.slats_fppu.angle() == pytest.approx(0.3)
    assert ctx.bench.host_variables["FLAPS_HANDLE_INDEX"] == 2
    assert ctx.bench.host_variables["SFCC_1_FLAP_DRIVE"] is True


class MaxRng:
    # Always walks upward at the full rate.
    def uniform(self, a: float, b: float) -> float:
        return b


def test_turbulence_command_walks_air_data_each_tick(ctx, capsys):
    for adiru in ctx.bench.adirus:
        adiru.rng = MaxRng()
    run_commands(ctx, "ias 150", "alpha 2", "turbulence 5 1", "step 2")

    assert "Turbulence set to 5.00 kt/s, 1.00 deg/s" in capsys.readouterr().out
    for adiru in ctx.bench.adirus:
        assert adiru.computed_airspeed().value == pytest.approx(151.0)
        assert adiru.alpha().value == pytest.approx(2.2)
    # Fallback values are not perturbed
    assert ctx.bench.indicated_airspeed_kt.value == 150.0


def test_air_data_held_without_turbulence(ctx):
    run_commands(ctx, "ias 150", "alpha 2", "step 3")

    for adiru in ctx.bench.adirus:
        assert adiru.computed_airspeed().value == 150.0
        assert adiru.alpha().value == 2.0

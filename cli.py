"""
Title: SFCC Interactive Bench Command Interpreter
Author: Alex Cooke
Date Created: 2026-10-15
Last Modified: 2026-10-17
Version: 1.2

Purpose:
Provides the interactive command interpreter for the SFCC bench: pilot lever
input, air data and sign-status injection, gear and power switching, tick
control, configuration annunciation, status printing and telemetry recording.

Targeted Requirements:
- None (supporting analysis, simulation, and tooling only)

Scope and Limitations:
- Text commands only; no graphical display of surface positions.
- Commands mutate bench inputs which are sampled on the next tick.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- pathlib (standard library)
- app_context.py
- cli_support.py
- flaps_conf.py
- signed_status.py
- telemetry_recorder.py

Related Documents:
- SFCC Requirements Specification
- SFCC CLI and Simulation Test Architecture Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from pathlib import Path

from app_context import AppContext
from cli_support import SfccBench
from flaps_conf import InvalidDetentError
from signed_status import SignStatus
from telemetry_recorder import TelemetryRecorder


class ConfigurationAnnunciator:
    # Prints each SFCC's flaps/slats configuration when it changes.
    def __init__(self):
        self._last: dict[int, tuple[str, str, bool]] = {}

    def __call__(self, bench: SfccBench) -> None:
        for out in bench.complex.outputs():
            current = (out.flaps_conf.name, out.slats_conf.name, out.alpha_lock_engaged)
            if self._last.get(out.number) == current:
                continue
            self._last[out.number] = current
            lock = " ALPHA LOCK" if out.alpha_lock_engaged else ""
            print(f"SFCC{out.number}: FLAPS {current[0]} SLATS {current[1]}{lock}")


def _parse_bool(token: str) -> bool | None:
    if token in ("0", "1"):
        return token == "1"
    return None


def _print_status(bench: SfccBench) -> None:
    print("\n=== STATUS ===")
    handle = bench.complex.flaps_handle
    print(f"Lever: {bench.lever.value}  Handle: {handle.previous_position()} -> {handle.position()}")
    print(f"FallbackIAS_kt: {bench.indicated_airspeed_kt.value:.1f}  FallbackAlpha_deg: {bench.local_alpha_deg.value:.2f}")

    for i, adiru in enumerate(bench.adirus, start=1):
        cas = adiru.computed_airspeed()
        aoa = adiru.alpha()
        print(f"ADIRU{i}: CAS {cas.value:.1f} kt [{cas.ssm.name}]  ALPHA {aoa.value:.2f} deg [{aoa.ssm.name}]")

    print(f"FlapsFeedback_deg: {bench.flaps_fppu.angle():.2f}  SlatsFeedback_deg: {bench.slats_fppu.angle():.2f}")

    for sfcc, lgciu in zip(bench.complex.sfccs, bench.lgcius):
        out = sfcc.outputs()
        print(
            f"SFCC{out.number}: powered={out.powered} on_ground={sfcc.is_on_ground} "
            f"(L={lgciu.left_compressed} R={lgciu.right_compressed})"
        )
        print(
            f"  FLAPS {out.flaps_conf.name} demand={out.flaps_demanded_angle_deg:.1f} drive={out.flaps_drive_signal}"
        )
        print(
            f"  SLATS {out.slats_conf.name} demand={out.slats_demanded_angle_deg:.1f} drive={out.slats_drive_signal} "
            f"alpha_lock={out.alpha_lock_engaged} "
            f"(speed={sfcc.slats_channel.alpha_lock_engaged_speed} alpha={sfcc.slats_channel.alpha_lock_engaged_alpha})"
        )
    print("=============\n")


def _print_help() -> None:
    print(
        """
Commands
  help                         Print help
  q                            Quit

Loop control
  run [period_s]               Start background update loop
  stop                         Stop background loop
  step [n]                     Run n update ticks (default 1)
  period <seconds>             Set background period (min 0.01)

Pilot / environment inputs
  lever <0-5>                  Set flaps lever detent
  ias <kt>                     Set ADIRU and fallback airspeed
  alpha <deg>                  Set ADIRU and fallback angle-of-attack
  fallback ias|alpha <v>       Set only the local fallback value
  ssm <1|2> ok|fail            Set ADIRU sign status (NORMAL_OPERATION / FAILURE_WARNING)
  gear 0|1                     Set both LGCIUs compressed FALSE/TRUE
  gear <1|2> <L 0|1> <R 0|1>   Set one LGCIU left/right compressed
  power <1|2> 0|1              Set SFCC power present FALSE/TRUE
  turbulence <kt/s> <deg/s>    Random-walk ADIRU airspeed and alpha each tick (0 0 = off)

State / diagnostics
  state                        Print SFCC configurations
  status                       Print full status block
  record <path>                Append per-tick outputs to a CSV file
"""
    )


def handle_command(ctx: AppContext, cmd: str) -> bool:
    # Returns False when the operator asked to quit.
    bench = ctx.bench
    parts = cmd.split()
    if not parts:
        return True

    op = parts[0].lower()

    if op in ("q", "quit", "exit"):
        return False

    if op in ("help", "?"):
        _print_help()
        return True

    if op == "run":
        if len(parts) >= 2:
            ctx.loop.set_period(float(parts[1]))
        ctx.loop.start()
        print(f"Loop running @ {ctx.loop.period_s:.3f}s")
        return True

    if op == "stop":
        ctx.loop.stop()
        print("Loop stopped")
        return True

    if op == "period":
        if len(parts) != 2:
            print("Usage: period <seconds>")
            return True
        ctx.loop.set_period(float(parts[1]))
        print(f"Loop period set to {ctx.loop.period_s:.3f}s")
        return True

    if op == "step":
        n = int(parts[1]) if len(parts) >= 2 else 1
        try:
            ctx.loop.step(n)
        except InvalidDetentError as exc:
            print(f"Tick rejected: {exc}")
            return True
        print(f"Stepped {n} ticks")
        return True

    if op == "lever":
        if len(parts) != 2:
            print("Usage: lever <0-5>")
            return True
        bench.lever.value = int(parts[1])
        print(f"Lever set to {bench.lever.value}")
        return True

    if op == "ias":
        if len(parts) != 2:
            print("Usage: ias <kt>")
            return True
        bench.set_airspeed_kt(float(parts[1]))
        print(f"Airspeed set to {bench.indicated_airspeed_kt.value:.1f} kt")
        return True

    if op == "alpha":
        if len(parts) != 2:
            print("Usage: alpha <deg>")
            return True
        bench.set_alpha_deg(float(parts[1]))
        print(f"Alpha set to {bench.local_alpha_deg.value:.2f} deg")
        return True

    if op == "fallback":
        if len(parts) != 3 or parts[1] not in ("ias", "alpha"):
            print("Usage: fallback ias|alpha <value>")
            return True
        if parts[1] == "ias":
            bench.indicated_airspeed_kt.value = float(parts[2])
        else:
            bench.local_alpha_deg.value = float(parts[2])
        print(f"Fallback {parts[1]} set to {float(parts[2]):.2f}")
        return True

    if op == "ssm":
        if len(parts) != 3 or parts[1] not in ("1", "2") or parts[2] not in ("ok", "fail"):
            print("Usage: ssm <1|2> ok|fail")
            return True
        ssm = SignStatus.NORMAL_OPERATION if parts[2] == "ok" else SignStatus.FAILURE_WARNING
        bench.adirus[int(parts[1]) - 1].set_ssm(ssm)
        print(f"ADIRU{parts[1]} SSM set to {ssm.name}")
        return True

    if op == "gear":
        if len(parts) == 2 and _parse_bool(parts[1]) is not None:
            bench.set_on_ground(_parse_bool(parts[1]))
            print(f"Gear compressed set to {_parse_bool(parts[1])}")
            return True
        if len(parts) == 4 and parts[1] in ("1", "2"):
            left, right = _parse_bool(parts[2]), _parse_bool(parts[3])
            if left is not None and right is not None:
                bench.lgcius[int(parts[1]) - 1].set_compressed(left, right)
                print(f"LGCIU{parts[1]} compressed L={left} R={right}")
                return True
        print("Usage: gear 0|1  OR  gear <1|2> <L 0|1> <R 0|1>")
        return True

    if op == "power":
        if len(parts) != 3 or parts[1] not in ("1", "2") or _parse_bool(parts[2]) is None:
            print("Usage: power <1|2> 0|1")
            return True
        bench.power[int(parts[1]) - 1].value = _parse_bool(parts[2])
        print(f"SFCC{parts[1]} power present set to {bench.power[int(parts[1]) - 1].value}")
        return True

    if op == "turbulence":
        if len(parts) != 3:
            print("Usage: turbulence <kt/s> <deg/s>")
            return True
        bench.set_turbulence(float(parts[1]), float(parts[2]))
        print(f"Turbulence set to {float(parts[1]):.2f} kt/s, {float(parts[2]):.2f} deg/s")
        return True

    if op == "state":
        for out in bench.complex.outputs():
            print(f"SFCC{out.number}: FLAPS {out.flaps_conf.name} SLATS {out.slats_conf.name}")
        return True

    if op == "status":
        _print_status(bench)
        return True

    if op == "record":
        if len(parts) != 2:
            print("Usage: record <path>")
            return True
        bench.telemetry_recorder = TelemetryRecorder(filepath=Path(parts[1]), clock=ctx.clock)
        print(f"Recording telemetry to {parts[1]}")
        return True

    print("Unknown command. Type 'help'.")
    return True


def command_loop(ctx: AppContext) -> None:
    _print_help()
    while not ctx.shutdown_event.is_set():
        try:
            cmd = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        try:
            keep_going = handle_command(ctx, cmd)
        except ValueError as exc:
            print(f"Invalid input: {exc}")
            continue

        if not keep_going:
            break

    ctx.shutdown()

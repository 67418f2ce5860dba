#!/usr/bin/env python3
import logging
import signal
import time
from pathlib import Path
from threading import Event

from app_context import AppContext
from cli import ConfigurationAnnunciator, command_loop
from cli_support import ControlLoop, SfccBench
from fault_recorder import FaultRecorder
from sfcc_configuration import SfccConfiguration


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def setup_signal_handlers(ctx: AppContext):
    def _handle_shutdown(signum, frame):
        logging.info("Shutdown signal received (%s)", signum)
        ctx.shutdown()

    signal.signal(signal.SIGINT, _handle_shutdown)
    signal.signal(signal.SIGTERM, _handle_shutdown)


def initialize(
    config: SfccConfiguration | None = None,
    period_s: float = 0.1,
    fault_log: str | Path | None = "sfcc_fault_log.txt",
) -> AppContext:
    logging.info("Initializing application")

    config = config or SfccConfiguration(name="SFCC-BENCH")

    # Refuse to start with incoherent thresholds
    config.validate()

    clock = time.monotonic

    fault_recorder = None
    if fault_log is not None:
        fault_recorder = FaultRecorder(filepath=fault_log, clock=clock)

    bench = SfccBench(config=config, period_s=period_s, fault_recorder=fault_recorder)

    def _on_error(exc: Exception) -> None:
        logging.error("Tick rejected: %s", exc)

    loop = ControlLoop(
        bench,
        period_s=period_s,
        on_tick=ConfigurationAnnunciator(),
        on_error=_on_error,
    )

    return AppContext(
        bench=bench,
        config=config,
        clock=clock,
        shutdown_event=Event(),
        loop=loop,
    )


def main():
    setup_logging()
    ctx = initialize()
    setup_signal_handlers(ctx)

    logging.info("Starting control loop (tick=%.3fs)", ctx.loop.period_s)
    ctx.loop.start()

    command_loop(ctx)

    logging.info("Main loop terminated")


if __name__ == "__main__":
    main()

# ride_share/io/event_logging.py
import json
import logging
import sys

from ride_share.app.hooks import NoopHooks
from ride_share.io.business_events import (
    FareCalculatedBiz,
    RideAssignedBiz,
    RideCreatedBiz,
    RideRequestedBiz,
)
from ride_share.io.recorder import Recorder


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def default_json_logger(name="ride_share", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class EventLogging(NoopHooks):
    """
    Structured JSON logs plus business-event records for every domain action
    routed through TripHandler.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
        quiet: bool = False,
    ):
        self.run_id = run_id
        self.recorder = recorder
        # quiet: record business events only, no log lines
        self.log = None if quiet else (logger or default_json_logger(level=level))
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        if self.log is None:
            return
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # ------------- Domain actions --------------------------

    def ride_created(self, ride):
        self._emit(
            "INFO", "ride_created", ride_id=ride.id, variant=ride.variant, distance=ride.distance
        )
        self.biz(
            RideCreatedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="ride_created",
                ride_id=ride.id,
                variant=ride.variant,
                distance=ride.distance,
            )
        )

    def fare_calculated(self, ride):
        self._emit("INFO", "fare_calculated", ride_id=ride.id, variant=ride.variant, fare=ride.fare)
        self.biz(
            FareCalculatedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="fare_calculated",
                ride_id=ride.id,
                variant=ride.variant,
                fare=ride.fare,
            )
        )

    def ride_assigned(self, driver, ride):
        n = driver.completed_rides
        self._emit("INFO", "ride_assigned", ride_id=ride.id, driver_id=driver.id, completed_rides=n)
        self.biz(
            RideAssignedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="ride_assigned",
                ride_id=ride.id,
                driver_id=driver.id,
                completed_rides=n,
            )
        )

    def ride_requested(self, rider, ride):
        n = len(rider.rides)
        self._emit("INFO", "ride_requested", ride_id=ride.id, rider_id=rider.id, requested_rides=n)
        self.biz(
            RideRequestedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="ride_requested",
                ride_id=ride.id,
                rider_id=rider.id,
                requested_rides=n,
            )
        )

    def error(self, op: str, *, exc: BaseException, **extra):
        self._emit("WARNING", "invalid_argument", op=op, error=str(exc), **extra)

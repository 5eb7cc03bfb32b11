"""Per-state CSV datasets with an mtime-validated read-through cache."""

from __future__ import annotations

import logging
import stat
import threading
from collections import OrderedDict
from pathlib import Path

import pandas as pd

from villageinfo.errors import InternalError, NotFound
from villageinfo.services.metrics import metrics

logger = logging.getLogger(__name__)

DISTRICT = "District"
BLOCK = "Block"
HABITATION = "Habitation Name"
FACILITY_NAME = "Facility Name"
ADDRESS = "Address"
CATEGORY = "Facility Category"
SUBCATEGORY = "Facility Subcategory"
LATITUDE = "Lattitude"  # sic, as spelled in the source datasets
LONGITUDE = "Longitude"

COLUMNS = [
    DISTRICT,
    BLOCK,
    HABITATION,
    FACILITY_NAME,
    ADDRESS,
    CATEGORY,
    SUBCATEGORY,
    LATITUDE,
    LONGITUDE,
]

_FileStamp = tuple[int, int]


def normalize(value: str) -> str:
    """Comparison key for location names: trimmed and case-folded."""
    return value.strip().casefold()


def select_rows(frame: pd.DataFrame, criteria: dict[str, str]) -> pd.DataFrame:
    """Rows whose normalized *column* equals the normalized wanted value."""
    mask = pd.Series(True, index=frame.index)
    for column, wanted in criteria.items():
        mask &= frame[column].str.strip().str.casefold() == normalize(wanted)
    return frame[mask]


class FrameCache:
    """Thread-safe LRU of parsed frames, each tagged with its file stamp.

    An entry is only returned while the file's ``(mtime_ns, size)`` still
    matches the stamp it was stored with. ``maxsize <= 0`` disables caching.
    """

    def __init__(self, maxsize: int = 32):
        self._maxsize = maxsize
        self._data: OrderedDict[str, tuple[_FileStamp, pd.DataFrame]] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self._maxsize > 0

    def get(self, key: str, stamp: _FileStamp) -> pd.DataFrame | None:
        if not self.enabled:
            return None
        with self._lock:
            entry = self._data.get(key)
            if entry is None or entry[0] != stamp:
                self._data.pop(key, None)
                metrics.inc_dataset_cache(False)
                return None
            self._data.move_to_end(key)
            metrics.inc_dataset_cache(True)
            return entry[1]

    def set(self, key: str, stamp: _FileStamp, frame: pd.DataFrame) -> None:
        if not self.enabled:
            return
        with self._lock:
            if key in self._data:
                del self._data[key]
            elif len(self._data) >= self._maxsize:
                self._data.popitem(last=False)
            self._data[key] = (stamp, frame)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._data)


class DatasetStore:
    """Reads ``<root>/<state>.csv`` files into string-typed DataFrames."""

    def __init__(self, root: str | Path, cache_size: int = 32):
        self.root = Path(root)
        self.cache = FrameCache(cache_size)

    def state_path(self, state: str) -> Path | None:
        """Dataset path for *state*, or None if the name cannot be a file stem."""
        if (
            not state
            or state.startswith(".")
            or "/" in state
            or "\\" in state
            or "\x00" in state
        ):
            return None
        return self.root / f"{state}.csv"

    def has_state(self, state: str) -> bool:
        path = self.state_path(state)
        return path is not None and path.is_file()

    def list_states(self) -> list[str]:
        try:
            return sorted(
                p.stem
                for p in self.root.iterdir()
                if p.suffix == ".csv" and p.is_file()
            )
        except OSError as exc:
            logger.error("Cannot list dataset directory %s: %s", self.root, exc)
            raise InternalError("Dataset directory could not be read") from exc

    def load(self, state: str) -> pd.DataFrame:
        """Return the dataset for *state*.

        Raises NotFound when no file exists for the state and InternalError
        when the file exists but cannot be read or parsed.
        """
        path = self.state_path(state)
        if path is None:
            raise NotFound("State data not found")
        try:
            st = path.stat()
        except FileNotFoundError:
            raise NotFound("State data not found") from None
        except OSError as exc:
            logger.error("Cannot stat dataset %s: %s", path, exc)
            raise InternalError("State data could not be read") from exc
        if not stat.S_ISREG(st.st_mode):
            raise NotFound("State data not found")

        stamp = (st.st_mtime_ns, st.st_size)
        frame = self.cache.get(state, stamp)
        if frame is None:
            frame = self._read(path)
            self.cache.set(state, stamp, frame)
        return frame

    def _read(self, path: Path) -> pd.DataFrame:
        metrics.inc_dataset_read()
        options = {
            "dtype": str,
            "keep_default_na": False,
            "skip_blank_lines": True,
            "encoding": "utf-8-sig",
            "encoding_errors": "replace",
        }
        try:
            width = len(pd.read_csv(path, nrows=0, **options).columns)
            # Fields past the header width (e.g. an unquoted comma in Address)
            # are dropped; the rest of the row is kept.
            frame = pd.read_csv(
                path,
                engine="python",
                index_col=False,
                usecols=list(range(width)),
                **options,
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame(columns=COLUMNS, dtype=str)
        except (pd.errors.ParserError, OSError) as exc:
            logger.error("Failed to parse dataset %s: %s", path, exc)
            raise InternalError("State data could not be read") from exc

        frame.columns = [str(c).strip() for c in frame.columns]
        for column in COLUMNS:
            if column not in frame.columns:
                frame[column] = ""
        logger.debug("Loaded %d rows from %s", len(frame), path)
        return frame.fillna("")

from __future__ import annotations

import logging
import operator
import os
from pathlib import Path
from typing import Any, Mapping, Protocol

import psutil

from device_monitor_gui.models.filesystem import AttributeKey, VolumeStats

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_STATVFS_FIELDS = (
    "f_bsize",
    "f_frsize",
    "f_blocks",
    "f_bfree",
    "f_bavail",
    "f_files",
    "f_ffree",
    "f_favail",
    "f_flag",
    "f_namemax",
    "f_fsid",
)


class AttributeUnavailable(Exception):
    """The OS could not supply the full attribute set for a path."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class AttributeProvider(Protocol):
    def attributes(self, path: str) -> Mapping[str, Any]:
        ...


class StatvfsProvider:
    """Reads volume attributes with a single ``os.statvfs`` call."""

    def attributes(self, path: str) -> dict[str, Any]:
        statvfs = getattr(os, "statvfs", None)
        if statvfs is None:
            raise AttributeUnavailable(path, "platform does not expose filesystem statistics")

        st = statvfs(path)
        attrs: dict[str, Any] = {
            name: getattr(st, name) for name in _STATVFS_FIELDS if hasattr(st, name)
        }
        attrs[AttributeKey.SIZE.value] = st.f_blocks * st.f_frsize
        attrs[AttributeKey.FREE_SIZE.value] = st.f_bavail * st.f_frsize
        attrs[AttributeKey.NODES.value] = st.f_files
        attrs[AttributeKey.FREE_NODES.value] = st.f_ffree
        if hasattr(st, "f_fsid"):
            attrs[AttributeKey.NUMBER.value] = _signed64(st.f_fsid)

        attrs.update(self._mount_info(path))
        return attrs

    def _mount_info(self, path: str) -> dict[str, str]:
        real = os.path.realpath(path)
        try:
            partitions = psutil.disk_partitions(all=True)
        except (OSError, psutil.Error) as e:
            logger.debug("Mount table unavailable for %s: %s", path, e)
            return {}

        best = None
        for p in partitions:
            if _contains(p.mountpoint, real):
                if best is None or len(p.mountpoint) > len(best.mountpoint):
                    best = p
        if best is None:
            return {}
        return {
            "mount_device": str(best.device),
            "mount_point": str(best.mountpoint),
            "mount_fstype": str(best.fstype),
        }


def _signed64(value: int) -> int:
    # f_fsid is an unsigned 64-bit value on Linux; keep the bit pattern.
    value = int(value) & 0xFFFFFFFFFFFFFFFF
    return value - 2**64 if value >= 2**63 else value


def _contains(mountpoint: str, path: str) -> bool:
    mp = mountpoint.rstrip(os.sep) or os.sep
    if path == mp:
        return True
    prefix = mp if mp.endswith(os.sep) else mp + os.sep
    return path.startswith(prefix)


class FilesystemReporter:
    def __init__(self, provider: AttributeProvider | None = None) -> None:
        self.provider = provider or StatvfsProvider()

    def query(self, path: str) -> VolumeStats:
        path = str(path)
        try:
            stats = self._query(path)
        except AttributeUnavailable as e:
            logger.warning("Filesystem attributes unavailable: %s", e)
            raise
        logger.debug(
            "Queried %s: total=%d free=%d used=%d",
            path,
            stats.total_bytes,
            stats.free_bytes,
            stats.used_bytes,
        )
        return stats

    def _query(self, path: str) -> VolumeStats:
        try:
            attrs = dict(self.provider.attributes(path))
        except OSError as e:
            raise AttributeUnavailable(path, e.strerror or str(e)) from e
        except ValueError as e:
            # embedded NUL and similar malformed paths
            raise AttributeUnavailable(path, str(e)) from e
        except (TypeError, LookupError) as e:
            raise AttributeUnavailable(path, f"provider returned no attribute set: {e}") from e

        total = _require_int(attrs, AttributeKey.SIZE, path)
        free = _require_int(attrs, AttributeKey.FREE_SIZE, path)
        volume_id = _require_int(attrs, AttributeKey.NUMBER, path)
        nodes = _require_int(attrs, AttributeKey.NODES, path)
        free_nodes = _require_int(attrs, AttributeKey.FREE_NODES, path)

        for key, value in (
            (AttributeKey.SIZE, total),
            (AttributeKey.FREE_SIZE, free),
            (AttributeKey.NODES, nodes),
            (AttributeKey.FREE_NODES, free_nodes),
        ):
            if value < 0:
                raise AttributeUnavailable(path, f"attribute {key.value} is negative: {value}")
        if free > total:
            raise AttributeUnavailable(path, f"free size {free} exceeds total size {total}")

        return VolumeStats(
            path=path,
            total_bytes=total,
            free_bytes=free,
            volume_id=volume_id,
            total_nodes=nodes,
            free_nodes_count=free_nodes,
            raw_debug_snapshot=_debug_snapshot(path, attrs),
        )


def _require_int(attrs: Mapping[str, Any], key: AttributeKey, path: str) -> int:
    if key.value not in attrs:
        raise AttributeUnavailable(path, f"missing attribute {key.value}")

    raw = attrs[key.value]
    value: int | None = None
    if isinstance(raw, float):
        if raw.is_integer():
            value = int(raw)
    elif not isinstance(raw, bool):
        try:
            value = operator.index(raw)
        except TypeError:
            value = None
    if value is None:
        raise AttributeUnavailable(path, f"attribute {key.value} is not an integer: {raw!r}")

    if not INT64_MIN <= value <= INT64_MAX:
        raise AttributeUnavailable(path, f"attribute {key.value} out of 64-bit range: {value}")
    return value


def _debug_snapshot(path: str, attrs: Mapping[str, Any]) -> str:
    lines = [f"components: {list(Path(path).parts)}", ""]
    lines.extend(f"{k}: {attrs[k]}" for k in sorted(attrs, key=str))
    return "\n".join(lines)

"""
Parallel Scanning Engine — four-way fan-out over signature partitions.

Architecture:
  • Split the work into four partitions: static forward, static reversed,
    digest forward, digest reversed.
  • One worker thread per partition; each writes only to its own slot.
  • The caller joins all workers, then concatenates slots in partition
    order, so output never depends on scheduling.

Partitions share nothing mutable, so a sequential run gives identical
results (ParallelScanConfig.concurrent = False).
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .signatures import SignatureDef, MatchResult
from .database import SignatureDatabase
from .matcher import scan_signatures

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanPartition:
    """One independent unit of matching work."""
    name: str
    signatures: tuple[SignatureDef, ...]
    reversed: bool


@dataclass
class ParallelScanConfig:
    """Configuration for partitioned scanning."""
    concurrent: bool = True     # False = run partitions one after another


def build_partitions(database: SignatureDatabase) -> tuple[ScanPartition, ...]:
    """The four partitions of a database, in output order."""
    return (
        ScanPartition("static", database.static, False),
        ScanPartition("static-reversed", database.static, True),
        ScanPartition("digest", database.digests, False),
        ScanPartition("digest-reversed", database.digests, True),
    )


def _run_partition(data: bytes, partition: ScanPartition) -> list[MatchResult]:
    matches = scan_signatures(data, partition.signatures, partition.reversed)
    logger.debug("Partition %s: %d/%d signatures matched",
                  partition.name, len(matches), len(partition.signatures))
    return matches


def search_partitions(
    data: bytes,
    partitions: tuple[ScanPartition, ...],
    config: Optional[ParallelScanConfig] = None,
) -> list[MatchResult]:
    """
    Scan data against every partition and join the results.

    Blocks until all partitions have finished.  If any worker raised, the
    first error (in partition order) is re-raised here and no results are
    returned.
    """
    config = config or ParallelScanConfig()

    if not config.concurrent:
        matches: list[MatchResult] = []
        for partition in partitions:
            matches.extend(_run_partition(data, partition))
        return matches

    slots: list[Optional[list[MatchResult]]] = [None] * len(partitions)
    errors: list[Optional[BaseException]] = [None] * len(partitions)

    def _worker(index: int, partition: ScanPartition):
        """Runs one partition; writes into its own slot only."""
        try:
            slots[index] = _run_partition(data, partition)
        except Exception as exc:
            errors[index] = exc
            logger.error("Partition %s failed: %s", partition.name, exc)

    workers = [
        threading.Thread(
            target=_worker, args=(i, p),
            name=f"magicscan-{p.name}", daemon=True,
        )
        for i, p in enumerate(partitions)
    ]
    for w in workers:
        w.start()
    for w in workers:
        w.join()

    for exc in errors:
        if exc is not None:
            raise exc

    matches = []
    for slot in slots:
        matches.extend(slot)
    return matches

"""Curated contradiction matrix entries.

Each entry maps an ordered (improving, worsening) parameter pair to the
suggested principle ids, most applicable first. The table is sparse and
not symmetric.
"""

from typing import Final

from ._models import ContradictionEntry

__all__ = ["CONTRADICTION_MATRIX"]

CONTRADICTION_MATRIX: Final[tuple[ContradictionEntry, ...]] = (
    # Response Latency (1)
    ContradictionEntry(1, 2, (4, 3, 9)),
    ContradictionEntry(1, 3, (16, 4, 13)),
    ContradictionEntry(1, 4, (4, 11, 5)),
    ContradictionEntry(1, 5, (4, 5, 6)),
    ContradictionEntry(1, 6, (4, 9, 3)),
    ContradictionEntry(1, 7, (1, 4, 37)),
    ContradictionEntry(1, 9, (9, 14, 7)),
    ContradictionEntry(1, 10, (4, 6, 1)),
    ContradictionEntry(1, 16, (4, 15, 6)),
    ContradictionEntry(1, 17, (16, 9, 5)),
    ContradictionEntry(1, 24, (4, 3, 9)),
    ContradictionEntry(1, 25, (8, 11, 1)),
    ContradictionEntry(1, 26, (5, 4, 11)),
    ContradictionEntry(1, 31, (4, 31, 16)),
    ContradictionEntry(1, 32, (4, 31, 1)),
    ContradictionEntry(1, 33, (16, 21, 4)),
    ContradictionEntry(1, 34, (20, 4, 29)),
    ContradictionEntry(1, 35, (14, 9, 37)),

    # Data Consistency (2)
    ContradictionEntry(2, 1, (3, 12, 14)),
    ContradictionEntry(2, 3, (3, 12, 6)),
    ContradictionEntry(2, 4, (14, 9, 11)),
    ContradictionEntry(2, 6, (3, 12, 10)),
    ContradictionEntry(2, 7, (14, 3, 6)),
    ContradictionEntry(2, 15, (13, 15, 6)),
    ContradictionEntry(2, 31, (14, 36, 3)),
    ContradictionEntry(2, 32, (14, 19, 3)),
    ContradictionEntry(2, 33, (39, 33, 14)),
    ContradictionEntry(2, 34, (20, 3, 36)),
    ContradictionEntry(2, 35, (14, 3, 36)),

    # Throughput (3)
    ContradictionEntry(3, 1, (12, 1, 4)),
    ContradictionEntry(3, 2, (9, 3, 12)),
    ContradictionEntry(3, 4, (11, 1, 8)),
    ContradictionEntry(3, 5, (1, 4, 12)),
    ContradictionEntry(3, 9, (14, 7, 6)),
    ContradictionEntry(3, 10, (1, 6, 13)),
    ContradictionEntry(3, 16, (13, 15, 10)),
    ContradictionEntry(3, 31, (1, 19, 31)),
    ContradictionEntry(3, 32, (19, 1, 31)),
    ContradictionEntry(3, 33, (21, 39, 1)),
    ContradictionEntry(3, 34, (20, 37, 1)),
    ContradictionEntry(3, 35, (14, 37, 7)),

    # Resource Cost (4)
    ContradictionEntry(4, 1, (4, 9, 5)),
    ContradictionEntry(4, 2, (9, 16, 3)),
    ContradictionEntry(4, 3, (8, 11, 1)),
    ContradictionEntry(4, 5, (4, 11, 9)),
    ContradictionEntry(4, 7, (11, 8, 1)),
    ContradictionEntry(4, 9, (11, 9, 7)),
    ContradictionEntry(4, 17, (11, 5, 8)),
    ContradictionEntry(4, 25, (8, 11, 1)),
    ContradictionEntry(4, 31, (27, 11, 31)),
    ContradictionEntry(4, 32, (27, 11, 34)),
    ContradictionEntry(4, 33, (27, 39, 11)),
    ContradictionEntry(4, 34, (27, 16, 37)),
    ContradictionEntry(4, 35, (27, 14, 37)),

    # Query Performance (5)
    ContradictionEntry(5, 1, (4, 3, 14)),
    ContradictionEntry(5, 2, (3, 4, 9)),
    ContradictionEntry(5, 4, (4, 11, 5)),
    ContradictionEntry(5, 6, (4, 12, 3)),
    ContradictionEntry(5, 10, (4, 1, 6)),
    ContradictionEntry(5, 16, (13, 4, 15)),
    ContradictionEntry(5, 22, (4, 13, 11)),
    ContradictionEntry(5, 29, (3, 13, 9)),

    # Data Freshness (6)
    ContradictionEntry(6, 1, (20, 17, 4)),
    ContradictionEntry(6, 2, (12, 3, 9)),
    ContradictionEntry(6, 3, (17, 19, 1)),
    ContradictionEntry(6, 4, (12, 8, 11)),
    ContradictionEntry(6, 5, (12, 4, 8)),
    ContradictionEntry(6, 10, (12, 6, 1)),
    ContradictionEntry(6, 26, (12, 8, 9)),
    ContradictionEntry(6, 31, (17, 31, 19)),
    ContradictionEntry(6, 32, (17, 19, 34)),
    ContradictionEntry(6, 33, (17, 39, 33)),
    ContradictionEntry(6, 34, (20, 17, 29)),
    ContradictionEntry(6, 35, (14, 17, 37)),

    # Horizontal Scalability (7)
    ContradictionEntry(7, 1, (37, 4, 1)),
    ContradictionEntry(7, 2, (3, 9, 12)),
    ContradictionEntry(7, 3, (37, 1, 14)),
    ContradictionEntry(7, 4, (11, 8, 1)),
    ContradictionEntry(7, 10, (1, 6, 13)),
    ContradictionEntry(7, 16, (13, 15, 1)),
    ContradictionEntry(7, 24, (3, 12, 9)),
    ContradictionEntry(7, 27, (1, 13, 6)),
    ContradictionEntry(7, 31, (1, 37, 31)),
    ContradictionEntry(7, 32, (1, 37, 34)),
    ContradictionEntry(7, 33, (39, 1, 33)),
    ContradictionEntry(7, 34, (37, 20, 1)),
    ContradictionEntry(7, 35, (14, 37, 7)),

    # Predictable Costs (8)
    ContradictionEntry(8, 1, (4, 9, 8)),
    ContradictionEntry(8, 3, (8, 11, 9)),
    ContradictionEntry(8, 7, (8, 11, 1)),

    # Fault Tolerance (9)
    ContradictionEntry(9, 1, (14, 7, 9)),
    ContradictionEntry(9, 2, (14, 36, 3)),
    ContradictionEntry(9, 3, (14, 7, 1)),
    ContradictionEntry(9, 4, (11, 7, 9)),
    ContradictionEntry(9, 10, (7, 6, 15)),
    ContradictionEntry(9, 15, (7, 10, 15)),
    ContradictionEntry(9, 31, (14, 27, 31)),
    ContradictionEntry(9, 32, (14, 34, 19)),
    ContradictionEntry(9, 33, (39, 14, 7)),
    ContradictionEntry(9, 34, (14, 20, 37)),

    # Infrastructure Complexity (10)
    ContradictionEntry(10, 1, (13, 5, 4)),
    ContradictionEntry(10, 7, (13, 1, 6)),
    ContradictionEntry(10, 9, (7, 13, 15)),
    ContradictionEntry(10, 33, (33, 13, 39)),
    ContradictionEntry(10, 34, (13, 33, 20)),
    ContradictionEntry(10, 35, (13, 7, 14)),

    # Authentication Strength (11)
    ContradictionEntry(11, 1, (4, 6, 5)),
    ContradictionEntry(11, 12, (8, 6, 13)),
    ContradictionEntry(11, 15, (13, 6, 15)),

    # User Friction (12)
    ContradictionEntry(12, 11, (8, 6, 13)),
    ContradictionEntry(12, 20, (2, 8, 6)),

    # Feature Completeness (13)
    ContradictionEntry(13, 14, (15, 8, 9)),
    ContradictionEntry(13, 15, (1, 13, 15)),
    ContradictionEntry(13, 22, (1, 15, 13)),

    # UX Simplicity (14)
    ContradictionEntry(14, 13, (9, 8, 15)),
    ContradictionEntry(14, 28, (8, 13, 15)),

    # Development Velocity (15)
    ContradictionEntry(15, 9, (10, 7, 15)),
    ContradictionEntry(15, 10, (13, 1, 6)),
    ContradictionEntry(15, 16, (10, 15, 13)),
    ContradictionEntry(15, 22, (15, 13, 11)),
    ContradictionEntry(15, 29, (13, 8, 12)),

    # Code Quality / Maintainability (16)
    ContradictionEntry(16, 1, (33, 15, 10)),
    ContradictionEntry(16, 3, (33, 13, 15)),
    ContradictionEntry(16, 4, (10, 13, 15)),
    ContradictionEntry(16, 15, (10, 15, 13)),
    ContradictionEntry(16, 30, (10, 7, 15)),
    ContradictionEntry(16, 33, (33, 39, 15)),
    ContradictionEntry(16, 34, (33, 13, 20)),
    ContradictionEntry(16, 35, (33, 7, 14)),

    # Model Accuracy (17)
    ContradictionEntry(17, 1, (16, 9, 5)),
    ContradictionEntry(17, 3, (1, 19, 16)),
    ContradictionEntry(17, 4, (11, 8, 5)),
    ContradictionEntry(17, 18, (5, 1, 9)),
    ContradictionEntry(17, 19, (13, 14, 8)),
    ContradictionEntry(17, 20, (2, 5, 13)),
    ContradictionEntry(17, 31, (1, 16, 31)),
    ContradictionEntry(17, 32, (1, 19, 34)),
    ContradictionEntry(17, 33, (39, 2, 33)),
    ContradictionEntry(17, 34, (16, 5, 20)),
    ContradictionEntry(17, 35, (14, 7, 40)),

    # Inference Latency (18)
    ContradictionEntry(18, 4, (5, 11, 4)),
    ContradictionEntry(18, 17, (1, 9, 5)),

    # Training Data Volume (19)
    ContradictionEntry(19, 4, (11, 8, 13)),
    ContradictionEntry(19, 20, (2, 5, 13)),

    # Privacy Preservation (20)
    ContradictionEntry(20, 6, (2, 9, 6)),
    ContradictionEntry(20, 12, (8, 2, 6)),
    ContradictionEntry(20, 17, (2, 5, 13)),

    # API Surface Area (21)
    ContradictionEntry(21, 11, (6, 13, 2)),
    ContradictionEntry(21, 22, (13, 15, 1)),

    # Maintenance Burden (22)
    ContradictionEntry(22, 13, (1, 15, 13)),
    ContradictionEntry(22, 15, (15, 13, 10)),

    # Offline Capability (23)
    ContradictionEntry(23, 2, (3, 9, 12)),
    ContradictionEntry(23, 24, (3, 9, 10)),

    # Sync Complexity (24)
    ContradictionEntry(24, 2, (9, 3, 12)),
    ContradictionEntry(24, 6, (12, 9, 4)),

    # Observability Depth (25)
    ContradictionEntry(25, 1, (32, 31, 19)),
    ContradictionEntry(25, 3, (32, 19, 31)),
    ContradictionEntry(25, 4, (11, 8, 1)),
    ContradictionEntry(25, 26, (8, 11, 1)),
    ContradictionEntry(25, 31, (32, 31, 19)),
    ContradictionEntry(25, 32, (32, 19, 34)),
    ContradictionEntry(25, 33, (32, 39, 33)),
    ContradictionEntry(25, 34, (32, 19, 20)),

    # Performance Overhead (26)
    ContradictionEntry(26, 25, (8, 11, 1)),
    ContradictionEntry(26, 11, (4, 5, 6)),

    # Multi-tenancy Isolation (27)
    ContradictionEntry(27, 4, (1, 13, 11)),
    ContradictionEntry(27, 7, (1, 6, 13)),
    ContradictionEntry(27, 10, (1, 6, 15)),

    # Customization Flexibility (28)
    ContradictionEntry(28, 14, (8, 15, 13)),
    ContradictionEntry(28, 22, (15, 13, 1)),

    # Schema Rigidity (29)
    ContradictionEntry(29, 5, (13, 3, 4)),
    ContradictionEntry(29, 15, (13, 8, 12)),

    # Deployment Frequency (30)
    ContradictionEntry(30, 9, (10, 7, 15)),
    ContradictionEntry(30, 16, (10, 15, 7)),
    ContradictionEntry(30, 22, (10, 7, 11)),

    # Memory Usage (31)
    ContradictionEntry(31, 1, (4, 31, 16)),
    ContradictionEntry(31, 2, (14, 36, 3)),
    ContradictionEntry(31, 3, (1, 19, 31)),
    ContradictionEntry(31, 4, (27, 11, 31)),
    ContradictionEntry(31, 6, (31, 19, 4)),
    ContradictionEntry(31, 7, (1, 37, 31)),
    ContradictionEntry(31, 9, (14, 27, 31)),
    ContradictionEntry(31, 10, (31, 13, 33)),
    ContradictionEntry(31, 16, (33, 31, 15)),
    ContradictionEntry(31, 17, (1, 16, 31)),
    ContradictionEntry(31, 25, (32, 31, 19)),
    ContradictionEntry(31, 32, (31, 34, 19)),
    ContradictionEntry(31, 33, (39, 31, 33)),
    ContradictionEntry(31, 34, (31, 20, 29)),
    ContradictionEntry(31, 35, (14, 31, 37)),

    # Storage Footprint (32)
    ContradictionEntry(32, 1, (4, 31, 1)),
    ContradictionEntry(32, 2, (14, 19, 3)),
    ContradictionEntry(32, 3, (19, 1, 31)),
    ContradictionEntry(32, 4, (27, 11, 34)),
    ContradictionEntry(32, 6, (19, 34, 17)),
    ContradictionEntry(32, 7, (1, 37, 34)),
    ContradictionEntry(32, 9, (14, 34, 19)),
    ContradictionEntry(32, 10, (34, 13, 33)),
    ContradictionEntry(32, 16, (33, 34, 15)),
    ContradictionEntry(32, 17, (1, 19, 34)),
    ContradictionEntry(32, 25, (32, 19, 34)),
    ContradictionEntry(32, 31, (31, 34, 19)),
    ContradictionEntry(32, 33, (39, 34, 33)),
    ContradictionEntry(32, 34, (34, 20, 29)),
    ContradictionEntry(32, 35, (14, 34, 37)),

    # Security Posture (33)
    ContradictionEntry(33, 1, (16, 21, 4)),
    ContradictionEntry(33, 2, (39, 33, 14)),
    ContradictionEntry(33, 3, (21, 39, 1)),
    ContradictionEntry(33, 4, (27, 39, 11)),
    ContradictionEntry(33, 6, (39, 33, 17)),
    ContradictionEntry(33, 7, (39, 1, 33)),
    ContradictionEntry(33, 9, (39, 14, 7)),
    ContradictionEntry(33, 10, (33, 13, 39)),
    ContradictionEntry(33, 16, (33, 39, 15)),
    ContradictionEntry(33, 17, (39, 2, 33)),
    ContradictionEntry(33, 25, (32, 39, 33)),
    ContradictionEntry(33, 31, (39, 31, 33)),
    ContradictionEntry(33, 32, (39, 34, 33)),
    ContradictionEntry(33, 34, (39, 21, 20)),
    ContradictionEntry(33, 35, (39, 14, 7)),

    # Real-time Performance (34)
    ContradictionEntry(34, 1, (20, 4, 29)),
    ContradictionEntry(34, 2, (20, 3, 36)),
    ContradictionEntry(34, 3, (20, 37, 1)),
    ContradictionEntry(34, 4, (27, 16, 37)),
    ContradictionEntry(34, 6, (20, 17, 29)),
    ContradictionEntry(34, 7, (37, 20, 1)),
    ContradictionEntry(34, 9, (14, 20, 37)),
    ContradictionEntry(34, 10, (13, 33, 20)),
    ContradictionEntry(34, 16, (33, 13, 20)),
    ContradictionEntry(34, 17, (16, 5, 20)),
    ContradictionEntry(34, 25, (32, 19, 20)),
    ContradictionEntry(34, 31, (31, 20, 29)),
    ContradictionEntry(34, 32, (34, 20, 29)),
    ContradictionEntry(34, 33, (39, 21, 20)),
    ContradictionEntry(34, 35, (14, 20, 37)),

    # Service Availability (35)
    ContradictionEntry(35, 1, (14, 9, 37)),
    ContradictionEntry(35, 2, (14, 3, 36)),
    ContradictionEntry(35, 3, (14, 37, 7)),
    ContradictionEntry(35, 4, (27, 14, 37)),
    ContradictionEntry(35, 6, (14, 17, 37)),
    ContradictionEntry(35, 7, (14, 37, 7)),
    ContradictionEntry(35, 10, (13, 7, 14)),
    ContradictionEntry(35, 16, (33, 7, 14)),
    ContradictionEntry(35, 17, (14, 7, 40)),
    ContradictionEntry(35, 31, (14, 31, 37)),
    ContradictionEntry(35, 32, (14, 34, 37)),
    ContradictionEntry(35, 33, (39, 14, 7)),
    ContradictionEntry(35, 34, (14, 20, 37)),
)

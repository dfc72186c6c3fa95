"""AquaLedger: ledgers, delivery scheduling and cash reconciliation for a bottled-water business."""

__version__ = "1.0.0"

"""Pool and trade state for quoting"""

# pyright: reportUnusedImport=false

from .pool_snapshot import PoolSnapshot, TradeSpec

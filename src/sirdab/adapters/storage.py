# src/sirdab/adapters/storage.py
from __future__ import annotations

from sirdab.adapters.config import AppConfig
from sirdab.adapters.logging_utils import get_logger
from sirdab.adapters.memory_repo import InMemoryListingGateway
from sirdab.adapters.sql_repo import SqlListingGateway
from sirdab.domain.ports import ListingGateway

log = get_logger("sirdab.storage")


def build_gateway(cfg: AppConfig) -> ListingGateway:
    if cfg.STORAGE_BACKEND == "sql":
        log.info("using sql storage", extra={"context": {"db_uri": cfg.DB_URI.split("@")[-1]}})
        return SqlListingGateway(cfg.DB_URI, echo=cfg.DB_ECHO)
    log.info("using in-memory fixture storage")
    return InMemoryListingGateway()

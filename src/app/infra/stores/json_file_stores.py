"""Stores em arquivo JSON: um documento por store, regravado a cada escrita.

Adequado para uma unica instancia do servico. Escritas sao atomicas
(arquivo temporario + rename) e serializadas por um lock do processo.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any

from app.domain.advisor import Advisor
from app.domain.runtime_config import RuntimeConfig
from app.protocols.advisor_store import AdvisorStoreProtocol, ConfigStoreProtocol
from utils.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any | None:
    """Le o documento; ausente ou vazio vale como primeiro boot.

    Conteudo ilegivel levanta `StoreUnavailableError` e o arquivo fica intacto.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        _log_read_failure(path, exc)
        raise StoreUnavailableError(f"json_store_read_failed:{path.name}") from exc
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        _log_read_failure(path, exc)
        raise StoreUnavailableError(f"json_store_corrupt:{path.name}") from exc


def _log_read_failure(path: Path, exc: Exception) -> None:
    logger.error(
        "json_store_read_failed",
        extra={"component": "json_file_store", "path": str(path), "error_type": type(exc).__name__},
    )


def _write_json(path: Path, data: Any) -> None:
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as exc:
        raise StoreUnavailableError(f"json_store_write_failed:{path.name}") from exc


class JsonFileAdvisorStore(AdvisorStoreProtocol):
    """Consultores em um unico arquivo `{advisor_id: registro}`."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    async def _read_all(self) -> dict[str, dict[str, Any]]:
        data = await asyncio.to_thread(_read_json, self._path)
        return data if isinstance(data, dict) else {}

    async def get(self, advisor_id: str) -> Advisor | None:
        record = (await self._read_all()).get(advisor_id)
        return Advisor.from_record(record) if record is not None else None

    async def list(self) -> list[Advisor]:
        return [Advisor.from_record(record) for record in (await self._read_all()).values()]

    async def put(self, advisor: Advisor) -> None:
        async with self._lock:
            records = await self._read_all()
            records[advisor.id] = advisor.to_record()
            await asyncio.to_thread(_write_json, self._path, records)

    async def delete(self, advisor_id: str) -> bool:
        async with self._lock:
            records = await self._read_all()
            if records.pop(advisor_id, None) is None:
                return False
            await asyncio.to_thread(_write_json, self._path, records)
            return True


class JsonFileConfigStore(ConfigStoreProtocol):
    """Configuracao de runtime em um arquivo JSON."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    async def load(self) -> RuntimeConfig | None:
        data = await asyncio.to_thread(_read_json, self._path)
        return RuntimeConfig.from_record(data) if isinstance(data, dict) else None

    async def save(self, config: RuntimeConfig) -> None:
        await asyncio.to_thread(_write_json, self._path, config.to_record())

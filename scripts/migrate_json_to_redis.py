#!/usr/bin/env python3
"""Copia consultores e configuracao dos arquivos JSON para o Redis.

Uso:
    python scripts/migrate_json_to_redis.py --redis-url redis://localhost:6379/0 --apply

Padrao: dry-run (nao escreve nada). Registros ja existentes no Redis sao
mantidos, a menos que --overwrite seja informado.
"""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass, replace

from redis.asyncio import Redis

from app.infra.stores import (
    JsonFileAdvisorStore,
    JsonFileConfigStore,
    RedisAdvisorStore,
    RedisConfigStore,
)


@dataclass(frozen=True)
class MigrationStats:
    scanned: int = 0
    skipped_existing: int = 0
    migrated: int = 0
    config_migrated: bool = False


async def migrate_stores(
    source_advisors: JsonFileAdvisorStore,
    source_config: JsonFileConfigStore,
    target_advisors: RedisAdvisorStore,
    target_config: RedisConfigStore,
    *,
    apply: bool,
    overwrite: bool = False,
) -> MigrationStats:
    stats = MigrationStats()

    for advisor in await source_advisors.list():
        stats = replace(stats, scanned=stats.scanned + 1)
        if not overwrite and await target_advisors.get(advisor.id) is not None:
            stats = replace(stats, skipped_existing=stats.skipped_existing + 1)
            continue
        if apply:
            await target_advisors.put(advisor)
        stats = replace(stats, migrated=stats.migrated + 1)

    config = await source_config.load()
    if config is not None and (overwrite or await target_config.load() is None):
        if apply:
            await target_config.save(config)
        stats = replace(stats, config_migrated=True)

    return stats


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--redis-url", required=True, help="URL do Redis de destino.")
    parser.add_argument("--advisors-path", default="advisors.json", help="Arquivo de consultores.")
    parser.add_argument("--config-path", default="config.json", help="Arquivo de configuracao.")
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Grava no Redis. Sem esta flag executa dry-run.",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Sobrescreve registros que ja existem no Redis.",
    )
    return parser.parse_args()


async def _run(args: argparse.Namespace) -> MigrationStats:
    client = Redis.from_url(args.redis_url, decode_responses=False)
    try:
        return await migrate_stores(
            JsonFileAdvisorStore(args.advisors_path),
            JsonFileConfigStore(args.config_path),
            RedisAdvisorStore(client),
            RedisConfigStore(client),
            apply=args.apply,
            overwrite=args.overwrite,
        )
    finally:
        await client.aclose()


def main() -> None:
    args = parse_args()
    stats = asyncio.run(_run(args))
    mode = "apply" if args.apply else "dry-run"
    print(
        f"[{mode}] scanned={stats.scanned} "
        f"migrated={stats.migrated} skipped_existing={stats.skipped_existing} "
        f"config_migrated={stats.config_migrated}"
    )


if __name__ == "__main__":
    main()

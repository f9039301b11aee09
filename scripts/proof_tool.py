#!/usr/bin/env python3
"""Create, close and inspect location proofs on a host runtime.

Usage
-----
Set environment variables and run::

    export NEARME_HOST_URL="http://127.0.0.1:8899"
    export NEARME_SERVER_SECRET_KEY="[12,34,...]"   # or ~/.config/solana/id.json
    python scripts/proof_tool.py derive MERCHANT_ID
    python scripts/proof_tool.py create MERCHANT_ID --lat 37.7749 --lng -122.4194
    python scripts/proof_tool.py show MERCHANT_ID
    python scripts/proof_tool.py close MERCHANT_ID

``--lat``/``--lng`` take degrees; they are scaled by 1,000,000 before
submission. ``derive`` works offline.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

import aiohttp

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from nearme_proof import (  # noqa: E402
    EventEmitter,
    HostRecordStore,
    LocationProof,
    MqttEventSink,
    ProofConfig,
    ProofError,
    ProofRegistry,
    ServerKeypair,
    derive_proof_address,
    to_scaled,
)


def _proof_to_dict(proof: LocationProof) -> dict[str, Any]:
    return {
        **proof.model_dump(),
        "latitude": proof.latitude,
        "longitude": proof.longitude,
        "verified_datetime": proof.verified_datetime.isoformat(),
    }


def _print(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, default=str, ensure_ascii=False))


async def _run(args: argparse.Namespace, config: ProofConfig) -> int:
    if args.command == "derive":
        address = derive_proof_address(args.merchant_id, config.program_id_bytes())
        _print({"merchant_id": address.merchant_id, "key": address.key_hex, "bump": address.bump})
        return 0

    signer = ServerKeypair.load(config)
    emitter = EventEmitter()
    mqtt_sink: MqttEventSink | None = None
    if config.mqtt_host:
        mqtt_sink = MqttEventSink.from_config(config)
        mqtt_sink.start()
        emitter.add_sink(mqtt_sink)

    try:
        async with aiohttp.ClientSession() as http:
            registry = ProofRegistry(HostRecordStore(config, signer, http), config, emitter=emitter)

            if args.command == "create":
                proof = await registry.create_location_proof(
                    to_scaled(args.lat),
                    to_scaled(args.lng),
                    args.merchant_id,
                    signer.identity,
                )
                _print({"created": _proof_to_dict(proof)})
            elif args.command == "close":
                closed = await registry.close_location_proof(args.merchant_id, signer.identity)
                _print({"closed": _proof_to_dict(closed) if closed is not None else None})
            else:
                found = await registry.get_location_proof(args.merchant_id)
                _print({"proof": _proof_to_dict(found) if found is not None else None})
    finally:
        if mqtt_sink is not None:
            mqtt_sink.stop()
    return 0


async def main() -> int:
    parser = argparse.ArgumentParser(
        description="Manage merchant location proofs on the host runtime.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    derive = sub.add_parser("derive", help="Print the derived address for a merchant")
    derive.add_argument("merchant_id")

    create = sub.add_parser("create", help="Create a location proof")
    create.add_argument("merchant_id")
    create.add_argument("--lat", type=float, required=True, help="Latitude in degrees")
    create.add_argument("--lng", type=float, required=True, help="Longitude in degrees")

    close = sub.add_parser("close", help="Close a location proof")
    close.add_argument("merchant_id")

    show = sub.add_parser("show", help="Print a location proof")
    show.add_argument("merchant_id")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        return await _run(args, ProofConfig.from_env())
    except ProofError as exc:
        code = getattr(exc, "code", "") or type(exc).__name__
        print(f"error: {code}: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

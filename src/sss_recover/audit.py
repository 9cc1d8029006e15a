# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Offline audit trail for recoveries with Ed25519 signatures and hash chaining.

Records never contain a recovered secret, only its SHA3-256 fingerprint.
"""
from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .decoder import to_decimal
from .document import CaseResult

GENESIS = "GENESIS"


def secret_fingerprint(secret: str) -> str:
    return hashlib.sha3_256(secret.encode("ascii")).hexdigest()


class AuditTrail:
    """Signed, hash-chained JSON records stored in one directory."""

    def __init__(self, directory: os.PathLike[str] | str) -> None:
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        self.key_path = self.directory / "signing_key.pem"
        self.chain_state_path = self.directory / "chain.state"

    def _load_private_key(self) -> Ed25519PrivateKey:
        if self.key_path.exists():
            data = self.key_path.read_bytes()
            return serialization.load_pem_private_key(data, password=None)
        private_key = Ed25519PrivateKey.generate()
        self.key_path.write_bytes(
            private_key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        )
        return private_key

    def _load_prev_hash(self) -> str:
        try:
            return self.chain_state_path.read_text().strip()
        except FileNotFoundError:
            return GENESIS

    def record_event(self, event: str, *, details: Dict[str, Any] | None = None) -> Path:
        timestamp = int(time.time())
        payload = {
            "event": event,
            "details": details or {},
            "timestamp": timestamp,
            "prev_hash": self._load_prev_hash(),
        }
        message = json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")
        signature = self._load_private_key().sign(message)
        chain_hash = hashlib.sha3_512(message + signature).hexdigest()
        entry = {
            "payload": payload,
            "signature": signature.hex(),
            "chain_hash": chain_hash,
        }
        file_path = self.directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
        file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
        self.chain_state_path.write_text(chain_hash)
        return file_path

    def record_result(self, result: CaseResult) -> Path:
        """Write the audit record matching one case outcome."""
        if result.ok:
            return self.record_event(
                "case.recovered",
                details={
                    "case": result.case,
                    "k": len(result.indices),
                    "indices": [to_decimal(index) for index in result.indices],
                    "secret_sha3_256": secret_fingerprint(result.secret or ""),
                },
            )
        return self.record_event(
            "case.failed",
            details={"case": result.case, "error": result.error.kind if result.error else None},
        )

    def verify_log(self, path: os.PathLike[str] | str) -> bool:
        # malformed records are reported as invalid, not raised
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
            payload = json.dumps(data["payload"], ensure_ascii=False, sort_keys=True).encode("utf-8")
            signature_hex = data.get("signature")
            signature = bytes.fromhex(signature_hex) if signature_hex else b""
        except (ValueError, KeyError, TypeError, AttributeError):
            return False
        if not self.key_path.exists():
            return False
        public_key = self._load_private_key().public_key()
        try:
            public_key.verify(signature, payload)
        except InvalidSignature:
            return False
        expected_chain_hash = hashlib.sha3_512(payload + signature).hexdigest()
        return expected_chain_hash == data.get("chain_hash")


__all__ = ["GENESIS", "AuditTrail", "secret_fingerprint"]

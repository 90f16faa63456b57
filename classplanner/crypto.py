"""Hashing and AES-GCM encryption helpers."""

from __future__ import annotations

import base64
import hashlib
import logging
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

logger = logging.getLogger(__name__)

IV_LENGTH = 12
TAG_LENGTH = 128
_KEY_LENGTHS = (128, 192, 256)
_HASHES = {256: hashlib.sha256, 384: hashlib.sha384, 512: hashlib.sha512}


class CryptoError(Exception):
    """A cryptographic operation failed."""

    kinds = ("InvalidParameter", "InternalSizeError", "InternalAsyncError")

    def __init__(self, kind: str) -> None:
        if kind not in self.kinds:
            raise ValueError(f"unknown CryptoError kind: {kind!r}")
        self.kind = kind
        super().__init__(kind)


@dataclass(frozen=True)
class AesGcmParams:
    """Parameters of one AES-GCM operation."""

    iv: bytes
    additional_data: bytes
    tag_length: int
    name: str = "AES-GCM"


def get_aes_gcm_params(iv: bytes, ad: bytes, tag_length: int) -> AesGcmParams:
    """Build AES-GCM parameters; the IV must be 12 bytes."""
    if len(iv) != IV_LENGTH:
        raise CryptoError("InvalidParameter")
    return AesGcmParams(iv=bytes(iv), additional_data=bytes(ad), tag_length=tag_length)


def sha_hash(data: bytes, size: int) -> bytes:
    """SHA-2 digest of ``data`` that is ``size`` bytes long (32, 48 or 64)."""
    algorithm = _HASHES.get(size * 8)
    if algorithm is None:
        raise CryptoError("InvalidParameter")
    digest = algorithm(data).digest()
    if len(digest) != size:
        raise CryptoError("InternalSizeError")
    return digest


def _cipher(key: bytes) -> AESGCM:
    try:
        return AESGCM(key)
    except (ValueError, TypeError) as exc:
        raise CryptoError("InvalidParameter") from exc


def encrypt_aes(key: bytes, data: bytes, iv: bytes, ad: bytes) -> bytes:
    """Encrypt with AES-GCM; the result is ciphertext followed by a 16-byte tag."""
    params = get_aes_gcm_params(iv, ad, TAG_LENGTH)
    return _cipher(key).encrypt(params.iv, bytes(data), params.additional_data)


def decrypt_aes(key: bytes, data: bytes, iv: bytes, ad: bytes) -> bytes:
    """Decrypt and verify AES-GCM output produced by ``encrypt_aes``."""
    params = get_aes_gcm_params(iv, ad, TAG_LENGTH)
    try:
        return _cipher(key).decrypt(params.iv, bytes(data), params.additional_data)
    except InvalidTag as exc:
        raise CryptoError("InternalAsyncError") from exc


def generate_aes_gcm_key(length: int) -> bytes:
    """A new random AES key of ``length`` bits (128, 192 or 256)."""
    if length not in _KEY_LENGTHS:
        raise CryptoError("InvalidParameter")
    return AESGCM.generate_key(bit_length=length)


def import_key(data: bytes) -> bytes:
    """Accept raw key bytes as an AES-GCM key."""
    key = bytes(data)
    if len(key) * 8 not in _KEY_LENGTHS:
        raise CryptoError("InvalidParameter")
    return key


def self_test() -> str:
    """Hash, encrypt and decrypt a fixed message; return the three results as lines."""
    iv = bytes(IV_LENGTH)
    ad = b""
    logger.debug("%r", get_aes_gcm_params(iv, ad, TAG_LENGTH))

    message = b"hello"
    key = generate_aes_gcm_key(256)
    encrypted = encrypt_aes(key, message, iv, ad)
    decrypted = decrypt_aes(key, encrypted, iv, ad)

    return "\n".join(
        (
            base64.urlsafe_b64encode(sha_hash(message, 32)).decode("ascii"),
            base64.urlsafe_b64encode(encrypted).decode("ascii"),
            decrypted.decode("utf-8"),
        )
    )
"""Download keys: keyed digests over a request's query string.

A download key is ``HMAC(secret, canonical_query)`` rendered as lowercase hex.
The canonical query is the raw query string with the key field removed.

Query grammar
-------------
A query string is a sequence of fields separated by ``&``. A field is either
``name`` or ``name=value``; the name ends at the first ``=``. Names are
compared after percent/plus decoding (``k%65y`` is the key field, because the
WSGI layer would also decode it that way). Fields are otherwise kept exactly
as received: never decoded, re-encoded, reordered or trimmed, and empty
fields survive.
"""

from __future__ import annotations

import hashlib
import hmac
import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import unquote_plus, urlencode

from ..errors import ConfigurationError, DuplicateTokenField

TOKEN_FIELD = "key"
DOWNLOAD_FIELD = "download"
FIELD_SEPARATOR = "&"
REDACTED = "***"

# Digests with a fixed output size; the key length is derived from them.
SUPPORTED_DIGESTS = ("sha1", "sha256", "sha512")


@dataclass(frozen=True)
class QueryField:
    raw: str

    @property
    def raw_name(self) -> str:
        return self.raw.split("=", 1)[0]

    @property
    def raw_value(self) -> Optional[str]:
        if "=" not in self.raw:
            return None
        return self.raw.split("=", 1)[1]

    @property
    def name(self) -> str:
        return unquote_plus(self.raw_name)

    @property
    def value(self) -> Optional[str]:
        raw = self.raw_value
        return unquote_plus(raw) if raw is not None else None


def split_fields(query: str) -> List[QueryField]:
    """Split a raw query string into fields without touching their bytes."""

    if query == "":
        return []
    return [QueryField(part) for part in query.split(FIELD_SEPARATOR)]


def join_fields(fields: List[QueryField]) -> str:
    return FIELD_SEPARATOR.join(field.raw for field in fields)


def _partition(query: str, token_field: str) -> tuple[List[QueryField], List[QueryField]]:
    tokens: List[QueryField] = []
    rest: List[QueryField] = []
    for field in split_fields(query):
        (tokens if field.name == token_field else rest).append(field)
    if len(tokens) > 1:
        raise DuplicateTokenField(token_field, len(tokens))
    return tokens, rest


def canonicalize(query: str, token_field: str = TOKEN_FIELD) -> str:
    """Return ``query`` with the token field removed.

    Raises :class:`DuplicateTokenField` if the token field appears more than
    once. A query without a token field is returned unchanged.
    """

    _, rest = _partition(query, token_field)
    return join_fields(rest)


def redact_token(query: str, token_field: str = TOKEN_FIELD) -> str:
    """Mask every token value so the query string is safe to log."""

    redacted = []
    for field in split_fields(query):
        if field.name == token_field and field.raw_value is not None:
            redacted.append(QueryField(f"{field.raw_name}={REDACTED}"))
        else:
            redacted.append(field)
    return join_fields(redacted)


def _encode(canonical: str) -> bytes:
    # surrogateescape round-trips arbitrary request bytes decoded the same way.
    return canonical.encode("utf-8", "surrogateescape")


class DownloadKeySigner:
    """Computes download keys for canonical query strings."""

    def __init__(
        self,
        secret: bytes | str,
        digest: str = "sha256",
        token_field: str = TOKEN_FIELD,
    ) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        if not secret:
            raise ConfigurationError("Download key secret must not be empty")
        digest = (digest or "").lower()
        if digest not in SUPPORTED_DIGESTS:
            raise ConfigurationError(f"Unsupported download key digest: {digest!r}")
        self._secret = secret
        self.digest = digest
        self.token_field = token_field
        self.token_length = hashlib.new(digest).digest_size * 2

    def __repr__(self) -> str:
        return f"DownloadKeySigner(digest={self.digest!r})"

    def sign(self, canonical: str) -> str:
        return hmac.new(self._secret, _encode(canonical), self.digest).hexdigest()

    def canonical_for(self, asset_id: str) -> str:
        return urlencode([(DOWNLOAD_FIELD, asset_id)])

    def link_query(self, asset_id: str) -> str:
        """Query string for a download link, key included."""

        canonical = self.canonical_for(asset_id)
        return f"{canonical}{FIELD_SEPARATOR}{self.token_field}={self.sign(canonical)}"


@dataclass(frozen=True)
class VerificationResult:
    accepted: bool
    reason: str

    def __bool__(self) -> bool:
        return self.accepted


REASON_OK = "ok"
REASON_MISSING = "missing_key"
REASON_MALFORMED = "malformed_key"
REASON_DUPLICATE = "duplicate_key"
REASON_BAD_SIGNATURE = "bad_signature"
REASON_RESOURCE_MISMATCH = "resource_mismatch"


class DownloadKeyVerifier:
    """Checks an inbound query string against the signer's secret."""

    def __init__(self, signer: DownloadKeySigner) -> None:
        self.signer = signer
        self._token_pattern = re.compile(rf"[0-9a-f]{{{signer.token_length}}}")

    def check(self, query: str, asset_id: str) -> VerificationResult:
        token_field = self.signer.token_field
        try:
            tokens, rest = _partition(query, token_field)
        except DuplicateTokenField:
            return VerificationResult(False, REASON_DUPLICATE)
        if not tokens:
            return VerificationResult(False, REASON_MISSING)
        provided = tokens[0].raw_value
        if provided is None or not self._token_pattern.fullmatch(provided):
            return VerificationResult(False, REASON_MALFORMED)

        expected = self.signer.sign(join_fields(rest))
        signature_ok = hmac.compare_digest(provided, expected)
        downloads = [field.value for field in rest if field.name == DOWNLOAD_FIELD]
        resource_ok = downloads == [asset_id]

        if not signature_ok:
            return VerificationResult(False, REASON_BAD_SIGNATURE)
        if not resource_ok:
            return VerificationResult(False, REASON_RESOURCE_MISMATCH)
        return VerificationResult(True, REASON_OK)

    def verify(self, query: str, asset_id: str) -> bool:
        return self.check(query, asset_id).accepted
